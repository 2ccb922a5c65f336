"""Employee dashboard package.

Organized by feature modules (users, employees, leaves, attendance, dashboard)
with a thin Flask controller layer over service/repository layers. The
``AuthContext`` holds the in-memory collections the views read from.
"""
