"""Application layer: use cases, request/response models and ports."""
