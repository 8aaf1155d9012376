"""Side files that live next to the task list: completion log and quotes."""
