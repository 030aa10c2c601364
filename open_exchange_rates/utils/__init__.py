"""Small helpers shared across the open_exchange_rates package."""
