"""Small helpers shared by the API and pipeline layers."""
