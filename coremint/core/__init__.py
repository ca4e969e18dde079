"""Core infrastructure: LLM providers, record stores and factories."""
