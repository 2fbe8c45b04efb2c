"""HOTP (RFC 4226) and TOTP (RFC 6238) one-time passwords."""
