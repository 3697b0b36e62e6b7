"""
Application Layer for the class scheduling service.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Scheduling, booking and class view operations
- exceptions.py: Typed failures shared with the infrastructure layer
"""
