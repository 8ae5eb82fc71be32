# This util answers realness checks from the wordfreq frequency tables.
# A word counts as recognized when it has been seen often enough in the
# language's corpus. Stray tokens (initials, typos, abbreviations) sit
# below DEFAULT_MIN_ZIPF; ordinary words like "emu" sit around 3.

from wordfreq import available_languages, zipf_frequency

DEFAULT_MIN_ZIPF = 2.5
MIN_WORD_LENGTH = 2


def is_supported_language(language):
    '''
    Returns True if wordfreq has a word list for `language`.
    '''
    return language in available_languages()


def check_word(word, language="en", min_zipf=DEFAULT_MIN_ZIPF):
    '''
    Returns True if `word` is a known word in `language`.
    Returns False otherwise.
    '''
    if len(word) < MIN_WORD_LENGTH or not word.isalpha():
        return False
    return zipf_frequency(word, language) > min_zipf
