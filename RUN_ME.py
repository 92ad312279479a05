import os
import sys

# Run straight from a checkout: python RUN_ME.py -- -a p1 p2 -b

sys.dont_write_bytecode = True


def _repo_root():
    return os.path.abspath(os.path.dirname(__file__))


def _ensure_src_on_syspath(repo_root):
    src_dir = os.path.join(repo_root, "src")
    if src_dir not in sys.path:
        sys.path.insert(0, src_dir)
    return src_dir


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    _ensure_src_on_syspath(_repo_root())

    from switch_table import cli

    return int(cli.main(argv) or 0)


if __name__ == "__main__":
    sys.exit(main())
