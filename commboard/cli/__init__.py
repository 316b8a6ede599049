"""CommBoard CLI Module."""
