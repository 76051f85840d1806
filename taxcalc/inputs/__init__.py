"""Input contracts, form-field parsing and cap notices."""
