"""Configuration, constants and database setup."""
