"""In-memory stand-in for the HubSpot CRM HTTP API.

Accepts the request shapes of the real CRM API, keeps submitted objects in
process memory and answers consistently enough for client libraries to be
tested against it without network access to the real service.
"""

__version__ = "1.0.0"
