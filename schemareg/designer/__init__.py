"""Schema designer — drafts schemas from structured requirements."""
