import importlib

MODULES = [
    'profanity_filter',
    'profanity_filter.config',
    'profanity_filter.errors',
    'profanity_filter.filter',
    'profanity_filter.logsetup',
    'profanity_filter.patterns',
    'profanity_filter.sanitiser',
    'profanity_filter.scanner',
    'profanity_filter.substitution',
    'profanity_filter.wordlists',
]

def test_all_modules_importable():
    for name in MODULES:
        importlib.import_module(name)
