"""Disc physics step."""

from huck.physics.disc_flight import throw_disc, update

__all__ = ["throw_disc", "update"]
