import logging
import sys

from switch_table import config_defaults
from switch_table.errors import NotFound


logger = logging.getLogger(__name__)


def is_switch(token):
    """
    Switches look like "-x": at least two characters, a leading '-', and a
    second character that is not 0-9 (so "-55" stays an argument).
    """
    if not isinstance(token, str):
        return False
    if len(token) <= 1:
        return False
    if token[0] != "-":
        return False
    return not ("0" <= token[1] <= "9")


class ArgumentTable:
    """
    Command line split into switches and the arguments that follow them.

    Example, for: app -a p1 p2 p3 -b p4 -c -d p5

        table = ArgumentTable()
        table.split_line(sys.argv)          # 4
        table.has_switch("-a")              # True
        table.argument("-a", 1)             # "p2"
        table.argument_count("-c")          # 0
        table.argument_or_default("-b", 1, "zz")   # "zz"

    The table is rebuilt by every parse and is not safe to share between
    threads while a parse is running.
    """

    def __init__(self, duplicates=None):
        if duplicates is None:
            duplicates = config_defaults.DEFAULT_DUPLICATE_POLICY
        if duplicates not in config_defaults.DUPLICATE_POLICIES:
            raise ValueError(
                "Unknown duplicate switch policy %r (expected one of: %s)"
                % (duplicates, ", ".join(config_defaults.DUPLICATE_POLICIES))
            )
        self.duplicates = duplicates
        self._groups = {}

    def __repr__(self):
        return "ArgumentTable(duplicates=%r, switches=%d)" % (self.duplicates, len(self._groups))

    def __contains__(self, name):
        return self.has_switch(name)

    @property
    def switch_count(self):
        return len(self._groups)

    def split_line(self, argv=None):
        """
        Parse a conventional argv (argv[0] is the program name and is skipped).
        Defaults to sys.argv. Returns the number of switches found.
        """
        if argv is None:
            argv = sys.argv
        return self.parse(list(argv)[1:])

    def parse(self, tokens):
        """
        Parse tokens into switches and arguments; returns the number of
        distinct switches found.

        Tokens before the first switch have no owner and are dropped. The
        token right after a switch is its first argument unless it is a
        switch itself; an empty first argument is consumed but not stored.
        """
        self._groups = {}
        tokens = list(tokens or [])

        target = None
        dropped = 0
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token is None:
                i += 1
                continue

            if is_switch(token):
                first = None
                if (i + 1) < len(tokens) and not is_switch(tokens[i + 1]):
                    first = tokens[i + 1]
                    i += 1
                target, keep_first = self._open_group(token)
                if first and keep_first:
                    target.append(first)
                elif first:
                    dropped += 1
            elif target is not None:
                target.append(token)
            else:
                dropped += 1
            i += 1

        logger.debug(
            "Parsed %d tokens into %d switches (%d dropped, duplicates=%s)",
            len(tokens),
            len(self._groups),
            dropped,
            self.duplicates,
        )
        return len(self._groups)

    def _open_group(self, switch):
        # Returns (list for the following bare arguments or None to drop them,
        # whether this occurrence's first argument is stored).
        group = self._groups.get(switch)
        if group is None:
            group = []
            self._groups[switch] = group
            return group, True

        logger.debug("Switch %r repeated (duplicates=%s)", switch, self.duplicates)
        if self.duplicates == config_defaults.DUPLICATE_KEEP:
            return group, False
        if self.duplicates == config_defaults.DUPLICATE_FIRST:
            return None, False
        if self.duplicates == config_defaults.DUPLICATE_LAST:
            del group[:]
        return group, True

    def has_switch(self, name):
        """Was the switch found on the command line?"""
        return name in self._groups

    def argument_count(self, name):
        """Number of arguments given to the switch; 0 if it was not given."""
        group = self._groups.get(name)
        if group is None:
            return 0
        return len(group)

    def argument(self, name, index):
        """
        Argument `index` of switch `name`.

        Raises NotFound if the switch was not given or has no argument at
        that index.
        """
        group = self._groups.get(name)
        if group is None:
            raise NotFound(name, index)
        if index < 0 or index >= len(group):
            raise NotFound(name, index, switch_present=True)
        return group[index]

    def argument_or_default(self, name, index, default=""):
        try:
            return self.argument(name, index)
        except NotFound:
            return default

    def to_dict(self):
        """Detached copy of the table: {switch: [arguments]} in first-seen order."""
        out = {}
        for switch, group in self._groups.items():
            out[switch] = list(group)
        return out
