"""HTTP surface exposing the bridge to the front-end."""
