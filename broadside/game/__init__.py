"""Game domain, AI, application and infrastructure layers."""
