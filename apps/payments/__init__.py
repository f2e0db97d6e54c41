"""Payment intents and the append-only payment ledger."""
