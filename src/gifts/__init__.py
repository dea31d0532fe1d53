"""Gift hand-off between people.

This module validates a receiver/gift pairing before delivery.
It forwards accepted gifts to the receiver's receive handler.
"""
