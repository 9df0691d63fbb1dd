"""Universal AI API Proxy."""
