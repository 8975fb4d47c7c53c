"""Onboard sensor model and obstacle avoidance for the Pheeno robot."""
