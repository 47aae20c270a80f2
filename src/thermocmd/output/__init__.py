"""Output rendering: Rich terminal tables or a JSON envelope."""
