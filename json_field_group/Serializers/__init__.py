from .FormSerializer import FormSerializer
