"""Radiance integrator, scanline scheduler, tone mapping and image output."""
