"""SolarRoots cooperative directory."""
