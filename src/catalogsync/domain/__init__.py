"""Catalog reconciliation domain: model, actions, diffing and ordering."""
