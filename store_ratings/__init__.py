"""Store Ratings API — role-based store rating service."""
