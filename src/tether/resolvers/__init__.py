"""Path resolvers: segment-wise reconstruction and store-directory fallback."""
