"""
Static reference data for offline scheme generation.

Everything here is built once at import time and never mutated: sequences are
tuples, mappings are read-only proxies and the scheme records are frozen
pydantic models.
"""
from types import MappingProxyType

from ..models.scheme import SchemeTemplate, NationalScheme


STATES = (
    'Andhra Pradesh', 'Arunachal Pradesh', 'Assam', 'Bihar', 'Chhattisgarh', 'Goa', 'Gujarat', 'Haryana',
    'Himachal Pradesh', 'Jharkhand', 'Karnataka', 'Kerala', 'Madhya Pradesh', 'Maharashtra', 'Manipur',
    'Meghalaya', 'Mizoram', 'Nagaland', 'Odisha', 'Punjab', 'Rajasthan', 'Sikkim', 'Tamil Nadu',
    'Telangana', 'Tripura', 'Uttar Pradesh', 'Uttarakhand', 'West Bengal',
)

CROPS = (
    'Rice', 'Wheat', 'Maize', 'Bajra', 'Jowar', 'Barley', 'Sugarcane', 'Cotton', 'Soybean', 'Groundnut',
    'Mustard', 'Sunflower', 'Pulses', 'Tur', 'Chana', 'Tea', 'Coffee', 'Rubber', 'Coconut', 'Banana',
    'Mango', 'Onion', 'Potato', 'Tomato', 'Chili', 'Millets',
)

DEFAULT_MULTIPLIER = 1.00

_MULTIPLIER_TIERS = {
    1.30: ('Maharashtra', 'Karnataka', 'Tamil Nadu', 'Telangana', 'Goa'),
    1.15: ('Gujarat', 'Kerala', 'Punjab', 'Haryana', 'West Bengal', 'Andhra Pradesh'),
    1.00: ('Rajasthan', 'Madhya Pradesh', 'Uttar Pradesh', 'Odisha', 'Assam', 'Chhattisgarh',
           'Uttarakhand', 'Himachal Pradesh'),
    0.85: ('Bihar', 'Jharkhand', 'Tripura', 'Manipur', 'Meghalaya', 'Mizoram', 'Nagaland',
           'Arunachal Pradesh', 'Sikkim'),
}

# Cost-of-living multiplier per state
REGIONAL_MULTIPLIERS = MappingProxyType({
    state: multiplier
    for multiplier, states in _MULTIPLIER_TIERS.items()
    for state in states
})

SCHEME_TEMPLATES = (
    SchemeTemplate(
        category='Crop Support Subsidy', base_subsidy_amount=15000,
        benefits='Provides direct financial support to farmers for crop cultivation, reducing the overall cost and financial burden.'),
    SchemeTemplate(
        category='Irrigation Equipment Subsidy', base_subsidy_amount=50000,
        benefits='Offers subsidies on the purchase of modern irrigation equipment like drip systems, sprinklers, and pumps to improve water efficiency.'),
    SchemeTemplate(
        category='Organic Farming Incentive', base_subsidy_amount=25000,
        benefits='Promotes organic farming by providing financial incentives for using organic inputs and certification, leading to higher-value produce.'),
    SchemeTemplate(
        category='Seed Distribution Scheme', base_subsidy_amount=10000,
        benefits='Ensures availability of high-quality, certified seeds at subsidized rates to improve crop yield and resilience.'),
    SchemeTemplate(
        category='Machinery Purchase Subsidy', base_subsidy_amount=100000,
        benefits='Helps farmers purchase essential agricultural machinery like tractors and harvesters at a reduced cost, promoting mechanization.'),
    SchemeTemplate(
        category='Solar Pump Scheme', base_subsidy_amount=120000,
        benefits='Provides significant subsidies for installing solar-powered water pumps, reducing dependency on electricity and diesel.'),
    SchemeTemplate(
        category='Crop Insurance Scheme', base_subsidy_amount=20000,
        benefits='Offers insurance coverage against crop failure due to natural calamities, pests, and diseases, ensuring financial stability.'),
    SchemeTemplate(
        category='Export Promotion Support', base_subsidy_amount=75000,
        benefits='Provides support for farmers and FPOs to meet international quality standards and access global markets.'),
    SchemeTemplate(
        category='Storage Infrastructure Aid', base_subsidy_amount=150000,
        benefits='Financial aid for constructing warehouses and cold storage units to reduce post-harvest losses and improve price realization.'),
    SchemeTemplate(
        category='Women Farmer Support Scheme', base_subsidy_amount=30000,
        benefits='Special financial assistance and training programs exclusively for women farmers to empower them in agriculture.'),
    SchemeTemplate(
        category='Small Land Holding Bonus Scheme', base_subsidy_amount=12000,
        benefits='Provides an additional bonus to small and marginal farmers to improve their income and livelihood security.'),
    SchemeTemplate(
        category='Rainfed Farming Support', base_subsidy_amount=18000,
        benefits='Support for farmers in rainfed areas through water conservation techniques and drought-resistant crop varieties.'),
    SchemeTemplate(
        category='Fertilizer Assistance Program', base_subsidy_amount=8000,
        benefits='Provides fertilizers and micro-nutrients at subsidized rates to ensure balanced soil nutrition.'),
    SchemeTemplate(
        category='Youth Agri-Entrepreneur Scheme', base_subsidy_amount=200000,
        benefits='Encourages youth to take up agriculture as a business by providing financial support and mentorship for innovative agri-projects.'),
    SchemeTemplate(
        category='High Yield Crop Incentive', base_subsidy_amount=22000,
        benefits='Incentivizes the cultivation of high-yield crop varieties to boost overall farm productivity and income.'),
)

INCOME_SUPPORT_SCHEME_NAME = 'Pradhan Mantri Kisan Samman Nidhi (PM-KISAN)'

NATIONAL_SCHEMES = (
    NationalScheme(
        name='Pradhan Mantri Fasal Bima Yojana (PMFBY)',
        benefits='Provides insurance coverage and financial support to farmers in case of crop failure due to natural calamities, pests & diseases.',
        eligibility_criteria='All farmers including sharecroppers and tenant farmers growing notified crops in notified areas are eligible. Compulsory for loanee farmers availing Crop Loan/KCC account for notified crops. Voluntary for non-loanee farmers.',
        application_link='https://pmfby.gov.in/'
    ),
    NationalScheme(
        name='Kisan Credit Card (KCC) Scheme',
        benefits='Provides adequate and timely credit support from the banking system to the farmers for their cultivation needs.',
        eligibility_criteria='Farmers, individual/joint cultivators, tenant farmers, oral lessees & sharecroppers, SHGs/JLG of farmers are eligible. Minimum age 18 years, maximum 75 years.',
        application_link='https://www.nabard.org/content.aspx?id=599'
    ),
    NationalScheme(
        name=INCOME_SUPPORT_SCHEME_NAME,
        benefits='Provides income support of ₹6,000 per year to all eligible farmer families across the country.',
        eligibility_criteria='All landholding farmer families, subject to certain exclusion criteria related to income and profession.',
        application_link='https://pmkisan.gov.in/'
    ),
)

# Estimated yearly benefit used for ranking national schemes
INCOME_SUPPORT_AMOUNT = 6000
NATIONAL_SCHEME_AMOUNT = 20000

FALLBACK_SCHEME = NationalScheme(
    name='Universal Farmer Development Scheme',
    benefits='A universal support scheme providing basic financial aid and access to resources for all farmers to ensure baseline agricultural development and welfare.',
    eligibility_criteria='All farmers residing in India are eligible to apply.',
)
FALLBACK_AMOUNT = 5000

NATIONAL_CATEGORY = 'National'
FALLBACK_CATEGORY = 'Fallback'

# Eligibility text fragments shared by every generated state scheme
LAND_SIZE_CRITERIA = 'Eligibility depends on land holding size (Small: 0-2 acres, Medium: 2-5 acres, Large: >5 acres).'
INCOME_CRITERIA = 'Income level is a key factor (e.g., priority for annual income < ₹1,00,000, reduced benefits for > ₹5,00,000).'


def get_regional_multiplier(region: str) -> float:
    """Cost-of-living multiplier for a region, 1.00 when unknown"""
    return REGIONAL_MULTIPLIERS.get(region, DEFAULT_MULTIPLIER)
