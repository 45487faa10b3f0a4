# Shared library for the fuel platform's Django services:
# error envelope, request tracing middleware, model mixins,
# pagination and health probes.

__version__ = "1.0.0"
