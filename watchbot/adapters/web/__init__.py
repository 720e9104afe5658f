"""Web adapter — keep-alive HTTP endpoint."""
