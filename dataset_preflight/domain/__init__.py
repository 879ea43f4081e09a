"""Domain layer for Dataset Preflight.

Pure analysis and rule logic: value classification, type inference,
column statistics, compliance rules and scoring. Nothing in this layer
touches the filesystem except through the entities handed to it.
"""
