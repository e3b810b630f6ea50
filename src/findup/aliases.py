from findup.core.models import HashAlgorithmName

ALGORITHM_ALIASES = {
    "sha1": HashAlgorithmName.SHA1,
    "xxh128": HashAlgorithmName.XXH128,
    "fast": HashAlgorithmName.XXH128,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = "Content digest used to confirm duplicates:\n" + "".join(
    f"  {alias:<11} : {ALGORITHM_ALIASES[alias].description}\n"
    for alias in ALGORITHM_CHOICES
)

SIZE_HELP_TEXT = (
    "Only consider files of this size, find(1) style:\n"
    "  +N : at least N      -N : at most N      N : exactly N\n"
    "Units: c (bytes, also the default), b (512-byte blocks), w (2 bytes),\n"
    "       k (KiB), M (MiB), G (GiB). Default: +0\n"
    "Example: %(prog)s --size +1M ~/Pictures"
)

EPILOG_TEXT = """
Examples:
  Basic usage - find duplicates in Downloads folder
  %(prog)s ~/Downloads

  Compare two trees, ignoring files smaller than 1 KiB
  %(prog)s --size +1k ~/Downloads ~/Documents

  Only look at files directly inside the given directories
  %(prog)s --mindepth 1 --maxdepth 1 ~/Downloads

  Digest with four worker threads and a faster hash
  %(prog)s -j 4 --algorithm fast /srv/media > duplicates.txt

Output: one path per line, groups separated by a blank line.
"""
