"""Fixed file sets written into a freshly created Vite + React project."""
