"""
handlers/ - Presentation Layer
================================
Console menu handlers. Each handler reads input from the user,
delegates to the appropriate Service, and shows the response.
No business logic lives here.
"""
