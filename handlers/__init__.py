"""
handlers/ - Presentation Layer
================================
HTTP route handlers. Each handler receives a request, delegates to the
UserService, and maps the result (or store failure) to a response.
No business logic lives here.
"""
