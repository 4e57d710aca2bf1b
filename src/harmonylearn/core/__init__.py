"""Core building blocks: models, schemas, database, validation and errors."""
