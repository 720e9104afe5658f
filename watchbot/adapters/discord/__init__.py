"""Discord adapter — bridges discord.Client to the command dispatcher."""
