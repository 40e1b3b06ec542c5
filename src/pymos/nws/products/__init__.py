"""NWS text product decoders."""
