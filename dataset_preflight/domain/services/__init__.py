"""Domain services: value classification, inference, statistics, rules and scoring."""
