"""Web page shell."""
