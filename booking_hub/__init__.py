"""Rental Booking Hub — multi-tenant transfer and car-rental booking backend."""
