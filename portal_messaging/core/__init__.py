"""Core domain logic: exceptions and realtime connection tracking."""
