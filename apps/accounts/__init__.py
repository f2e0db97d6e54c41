"""
Accounts app - user profiles, roles and request authentication.

Identities are proven by an external verifier (Firebase ID tokens in
production, locally signed JWTs in development and tests). The ``User``
model is the role store: it maps a verified email to profile attributes
and the organizer/participant role flag.
"""
