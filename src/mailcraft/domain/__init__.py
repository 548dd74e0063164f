"""Domain constants, errors and value types."""
