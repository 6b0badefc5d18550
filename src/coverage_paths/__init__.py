"""Post-processing of surface-coverage tool paths: margin trimming and segment sequencing."""
