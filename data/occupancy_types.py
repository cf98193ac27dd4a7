"""Occupancy classifications with occupant load factors and hazard tiers."""

from typing import Dict, List

from models.occupancy import OccupancyType


def _occ(occupancy_id, name, description, factor, hazard, examples):
    return OccupancyType(occupancy_id, name, description, factor, hazard, examples)


OCCUPANCY_TYPES: List[OccupancyType] = [
    _occ("assembly-fixed-seats", "Assembly (Fixed Seats)", "Places of assembly with fixed seats",
         0.65, "light", "Theaters, auditoriums, churches, convention halls with fixed seats"),
    _occ("assembly-concentrated", "Assembly (Concentrated)",
         "Places of assembly without fixed seats, concentrated use (chairs only, not fixed)",
         0.65, "light", "Conference rooms, lecture halls, dining areas with non-fixed chairs"),
    _occ("assembly-less-concentrated", "Assembly (Less Concentrated)",
         "Places of assembly without fixed seats, less concentrated use (tables and chairs)",
         1.4, "light", "Art galleries, exhibition halls, museums, restaurants with tables and chairs"),
    _occ("assembly-standing", "Assembly (Standing Space)", "Places of assembly, standing space",
         0.28, "light", "Waiting areas, standing-only venues, bars without seating"),
    _occ("business", "Business", "Office, professional or service-type transactions",
         9.3, "light", "Banks, offices, government buildings, call centers, BPO facilities"),
    _occ("educational", "Educational", "Schools and educational facilities",
         1.9, "light", "Schools, universities, training centers, daycare facilities, classrooms"),
    _occ("factory-industrial-low", "Factory/Industrial (Low Hazard)",
         "Manufacturing, processing facilities with low fire hazard",
         9.3, "ordinary", "Appliance assembly, electronics manufacturing, food processing"),
    _occ("factory-industrial-moderate", "Factory/Industrial (Moderate Hazard)",
         "Manufacturing, processing facilities with moderate fire hazard",
         9.3, "ordinary", "Automobile assembly, woodworking, textile manufacturing"),
    _occ("high-hazard", "High Hazard", "Facilities with highly combustible materials or flammable substances",
         9.3, "high", "Chemical plants, refineries, fireworks manufacturing, paint factories"),
    _occ("institutional-restrained", "Institutional (Restrained)",
         "Facilities where occupants are under restraint or security",
         11.1, "light", "Prisons, jails, detention centers, mental health facilities with restrained patients"),
    _occ("healthcare-hospitals", "Healthcare (Hospitals)",
         "Facilities that provide medical, psychiatric, or surgical care on a 24-hour basis",
         22.3, "light", "General hospitals, specialty hospitals, emergency care facilities, trauma centers"),
    _occ("healthcare-outpatient", "Healthcare (Outpatient)",
         "Facilities that provide services to patients who do not stay overnight",
         9.3, "light", "Outpatient clinics, medical offices, ambulatory care centers, dialysis centers"),
    _occ("healthcare-nursing-homes", "Healthcare (Nursing Homes)",
         "Facilities that provide nursing care and related services on a 24-hour basis",
         22.3, "light", "Nursing homes, skilled nursing facilities, convalescent homes, long-term care facilities"),
    _occ("institutional-general", "Institutional (General)",
         "Facilities that provide care for people with physical limitations or medical conditions",
         22.3, "light", "Assisted living facilities, rehabilitation centers, hospice facilities"),
    _occ("mercantile", "Mercantile", "Retail stores, markets, shopping centers",
         2.8, "ordinary", "Department stores, supermarkets, shopping malls, retail shops"),
    _occ("residential-hotels", "Residential (Hotels)", "Hotels, motels, dormitories, transient accommodations",
         18.6, "light", "Hotels, motels, dormitories, hostels, boarding houses, transient lodging"),
    _occ("residential-apartments", "Residential (Apartments)",
         "Apartment buildings, condominiums, permanent dwellings",
         18.6, "light", "Apartment buildings, condominiums, townhouses, multi-family dwellings"),
    _occ("storage-low", "Storage (Low Hazard)", "Warehouses, storage facilities with low hazard contents",
         46.5, "ordinary", "Storage of non-combustible materials, furniture warehouses, general merchandise"),
    _occ("storage-high", "Storage (High Hazard)", "Warehouses, storage facilities with high hazard contents",
         46.5, "high", "Storage of flammable/combustible liquids, aerosols, plastics, rubber tires"),
    _occ("mall-complex", "Mall Complex", "Shopping mall complexes with multiple stores and common areas",
         2.8, "ordinary", "Shopping malls, commercial complexes with multiple retail establishments"),
    _occ("mixed-use", "Mixed-Use", "Buildings with multiple occupancy types",
         9.3, "ordinary", "Buildings combining residential, commercial, and office spaces"),
    _occ("day-care", "Day Care",
         "Facilities that provide care for more than 3 children who stay less than 24 hours",
         3.3, "light", "Child day care centers, nurseries, preschools for children under 6 years old"),
    _occ("residential-board-care", "Residential Board and Care",
         "Facilities that provide personal care services, lodging, and meals to 4 or more residents",
         18.6, "light", "Assisted living facilities, group homes, halfway houses, social rehabilitation facilities"),
    _occ("solar-photovoltaic-facility", "Solar Photovoltaic Facility",
         "Facilities that generate electricity using solar panels and associated equipment",
         46.5, "ordinary", "Solar farms, rooftop solar installations, solar power plants, photovoltaic arrays"),
    _occ("wind-turbine-facility", "Wind Turbine Facility",
         "Facilities that generate electricity using wind turbines and associated equipment",
         46.5, "ordinary", "Wind farms, individual wind turbines, wind power plants"),
    _occ("energy-storage-system", "Energy Storage System",
         "Facilities that store energy for later use, including battery storage systems",
         46.5, "high", "Battery energy storage systems, pumped hydro storage, thermal energy storage"),
    _occ("special-structures", "Special Structures",
         "Buildings or structures with unique characteristics that require special fire safety considerations",
         9.3, "ordinary", "Aerodromes, fixed guideway transit systems, offshore energy facilities, piers"),
    _occ("ambulatory-healthcare", "Ambulatory Healthcare",
         "Facilities that provide services to four or more patients simultaneously who are rendered "
         "incapable of self-preservation",
         9.3, "light", "Ambulatory surgical centers, urgent care facilities, hemodialysis units"),
    _occ("detention-correctional", "Detention and Correctional",
         "Facilities where occupants are under restraint or security and are generally incapable of "
         "self-preservation",
         11.1, "light", "Prisons, jails, reformatories, detention centers, correctional centers"),
    _occ("residential-dormitories", "Residential (Dormitories)",
         "Group housing facilities for people not related by blood or marriage",
         18.6, "light", "College dormitories, workers dormitories, military barracks"),
    _occ("business-data-centers", "Business (Data Centers)",
         "Facilities used for housing computer and network equipment",
         9.3, "ordinary", "Server farms, network operation centers, data processing centers"),
    _occ("laboratory", "Laboratory", "Facilities for scientific research, experiments, or testing",
         9.3, "high", "Research laboratories, testing facilities, educational laboratories, medical laboratories"),
    _occ("telecommunication-facility", "Telecommunication Facility",
         "Facilities used for communication networks and broadcasting",
         9.3, "ordinary", "Cell towers, broadcast stations, satellite communication facilities"),
    _occ("waste-management-facility", "Waste Management Facility",
         "Facilities for processing, treating, or disposing of waste materials",
         46.5, "high", "Recycling centers, waste-to-energy plants, landfills, composting facilities"),
    _occ("water-treatment-facility", "Water Treatment Facility",
         "Facilities for treating water for potable use or wastewater treatment",
         46.5, "ordinary", "Water purification plants, wastewater treatment plants, desalination facilities"),
    _occ("transportation-terminal", "Transportation Terminal", "Facilities for passenger transportation services",
         1.4, "ordinary", "Bus terminals, train stations, ferry terminals, airport terminals"),
    _occ("marina", "Marina", "Facilities for docking and storing watercraft",
         46.5, "ordinary", "Boat docks, yacht clubs, harbor facilities, boat storage areas"),
    _occ("agricultural-facility", "Agricultural Facility", "Facilities for agricultural production and processing",
         46.5, "ordinary", "Barns, greenhouses, grain silos, livestock facilities, food processing plants"),
    _occ("mining-facility", "Mining Facility", "Facilities for extraction and processing of minerals",
         46.5, "high", "Underground mines, open-pit mines, mineral processing plants, quarries"),
    _occ("offshore-facility", "Offshore Facility", "Structures located on water for various purposes",
         9.3, "high", "Oil platforms, floating production storage facilities, offshore wind farms"),
    _occ("power-generation-plant", "Power Generation Plant",
         "Facilities that generate electricity through various means",
         46.5, "high", "Coal power plants, natural gas plants, hydroelectric plants, geothermal plants"),
    _occ("historical-building", "Historical Building",
         "Buildings with historical or cultural significance requiring special preservation considerations",
         9.3, "ordinary", "Heritage sites, museums in historical buildings, ancestral houses, colonial structures"),
    _occ("place-of-worship", "Place of Worship", "Buildings used for religious services and activities",
         0.65, "light", "Churches, mosques, temples, chapels, cathedrals, prayer halls"),
]

_BY_ID: Dict[str, OccupancyType] = {o.occupancy_id: o for o in OCCUPANCY_TYPES}


def get_occupancy_type(occupancy_id: str) -> OccupancyType:
    """Look up an occupancy type by id."""
    try:
        return _BY_ID[occupancy_id]
    except KeyError:
        raise ValueError(f"Unknown occupancy type: {occupancy_id}") from None


def occupancy_ids() -> List[str]:
    return [o.occupancy_id for o in OCCUPANCY_TYPES]
