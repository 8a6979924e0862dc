"""jobteardown: dispatch infrastructure teardown jobs for disabled build jobs."""

__version__ = "0.1.0"
