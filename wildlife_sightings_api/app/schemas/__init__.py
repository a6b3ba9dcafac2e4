"""
Pydantic schema definitions for API payloads.

``sighting`` holds the record model read from the data file together
with the response shapes of the aggregated views.
"""
