"""Version information for translation-sync."""

__version__ = "1.2.0"
__author__ = "Sezgin Paksoy"
__description__ = "Extract tr() keys from source and keep JSON locale files in sync"

# Changelog:
# 1.2.0 - Merge hardening
#        - Locale stores are loaded before any write during merge
#        - Malformed locale files abort the merge with no partial effects
#        - Failed locales stay in toTranslate.json instead of being dropped
#        - MergeInvariantError when validation passes but nothing merges
#
# 1.1.0 - Synchronize improvements
#        - Stale toTranslate.json is removed when everything is translated
#        - Filled entries of an unmerged toTranslate.json survive a re-run
#        - --dry-run and JSON/Markdown sync reports
#        - Structured logging (translation_sync.utils.logging)
#
# 1.0.0 - Initial release
#        - State-machine tr() literal scanner
#        - synchronize / merge commands
#        - .translation-sync.yml configuration
