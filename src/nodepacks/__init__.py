"""Node packs shipped with this distribution."""
