"""Core components of winstrap: provisioning, install checking, configuration."""
