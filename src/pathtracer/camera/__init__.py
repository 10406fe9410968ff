"""Camera model mapping image coordinates to world-space rays."""
