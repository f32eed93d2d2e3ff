"""HTTP API for the quote relayer."""
