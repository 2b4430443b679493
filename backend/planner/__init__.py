"""Trip itinerary planner backend."""
