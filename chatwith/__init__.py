"""Chat with local ollama models from the terminal, keeping named model entries and per-model history."""

__version__ = "0.1.0"