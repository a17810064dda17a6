class InvariantViolation(RuntimeError):
    """A colorer produced a slot holding two mutually conflicting courses.

    Both colorers are deterministic, so this signals a defect in the algorithm
    rather than bad input; rerunning reproduces it.
    """

    def __init__(self, slot: int, first: str, second: str):
        self.slot = slot
        self.first = first
        self.second = second
        super().__init__(f"Conflict detected in slot {slot}: {first} and {second}")
