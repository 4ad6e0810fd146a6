"""
Clinic app - clients, pets, appointments, clinical notes, admissions,
boarding and invoices for a veterinary practice.
"""
