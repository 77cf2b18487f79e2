"""Coast FIRE projection engine and its JSON API."""
