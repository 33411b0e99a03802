"""Calendar week / year conversions."""
