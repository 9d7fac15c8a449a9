"""QR code generation: payload encoders, render pipeline, batch runs."""
