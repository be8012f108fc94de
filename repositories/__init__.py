from .seed_file import SeedFileRepository, SeedFileError
from .contacts_file import ContactsFileRepository

__all__ = ['SeedFileRepository', 'SeedFileError', 'ContactsFileRepository']
