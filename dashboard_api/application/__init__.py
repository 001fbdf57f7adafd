"""Application layer: form validation, outcomes and mutation handlers."""
