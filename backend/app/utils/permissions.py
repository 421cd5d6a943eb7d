"""Role constants shared by routers and scripts."""

ADMIN = "admin"
MEMBER = "member"
