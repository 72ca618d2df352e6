"""Runtime services shared by the engine (telemetry, logging)."""
