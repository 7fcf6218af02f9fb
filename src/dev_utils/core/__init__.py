"""Per-repository steps and the git / terraform workflows."""
