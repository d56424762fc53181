"""API routers for the clinic chatbot backend."""
