"""Host adapters for embedding input sessions in UI frameworks."""
