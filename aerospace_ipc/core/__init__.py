"""Constants, configuration and exceptions shared by the client and services."""
