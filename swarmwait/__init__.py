"""swarmwait - block until Docker Swarm services reach their desired task count."""

__version__ = "0.1.0"
