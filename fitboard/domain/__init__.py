"""Domain logic independent of transport and storage."""
