"""Job board backend: users, companies, vacancies, applications and resumes"""

__version__ = "1.0.0"
