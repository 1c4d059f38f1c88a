"""Library for encoding rfc5545 content lines."""
