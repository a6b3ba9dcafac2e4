"""
Service layer abstraction.

``data_loader`` reads and validates the sightings file on every call;
``sighting_service`` holds the query functions and the
``SightingService`` facade used by the API handlers.
"""
