"""Domain layer for todolists: tasks, lists and filters. No I/O."""
