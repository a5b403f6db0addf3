"""Platform bridges: ``winreg`` for the volatile scope, ``user32`` for broadcasts."""
