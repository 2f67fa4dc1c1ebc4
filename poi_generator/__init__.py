"""Tourist attraction (POI) generator backed by an LLM chat completion API."""
