"""Invoice and user administration dashboard: form mutation handlers over HTTP."""
