"""Interface adapters exposing the activity core."""
