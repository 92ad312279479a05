class NotFound(LookupError):
    """
    Raised by ArgumentTable.argument() when the switch was not on the command
    line, or when it was but has no argument at the requested index.
    """

    def __init__(self, switch, index, switch_present=False):
        self.switch = switch
        self.index = index
        self.switch_present = bool(switch_present)
        if self.switch_present:
            msg = "Switch %r has no argument at index %r" % (switch, index)
        else:
            msg = "Switch %r was not given" % (switch,)
        super().__init__(msg)
