"""Color-coded jj/git status fragment for shell prompts."""
