"""Identity: password hashing, credentials sign-in and sessions."""
