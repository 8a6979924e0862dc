"""Built-in plugins shipped with jobteardown."""
