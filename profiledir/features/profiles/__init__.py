"""Profile directory feature: identities, credentials and the directory listing."""
