"""Built-in document stages. Importing a module registers its stage."""
