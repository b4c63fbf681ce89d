"""DIGIT platform backend services: error retry and service request modules."""
