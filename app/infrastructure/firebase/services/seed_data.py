"""Fixed demo dataset used to bootstrap an empty store.

Documents are in stored form (camelCase fields); ids are stable so that
seeding is deterministic. dobrinja-apartments reuses the sunny-sarajevo
service list with a ``dobrinja-`` id prefix.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

SUNNY_SARAJEVO = "sunny-sarajevo"
MOUNTAIN_VIEW = "mountain-view"
DOBRINJA_APARTMENTS = "dobrinja-apartments"


def _t(en: str, bs: str) -> dict[str, str]:
    return {"en": en, "bs": bs}


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=UTC)


SEED_TENANTS: list[dict[str, Any]] = [
    {
        "id": SUNNY_SARAJEVO,
        "slug": SUNNY_SARAJEVO,
        "name": "Sunny Sarajevo Apartment",
        "description": _t(
            "Welcome to your home away from home in the heart of Sarajevo. Explore our curated services to make your stay unforgettable!",
            "Dobrodošli u vaš dom daleko od doma u srcu Sarajeva. Istražite naše usluge kako biste učinili vaš boravak nezaboravnim!",
        ),
        "branding": {
            "heroImage": "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?w=1600&q=80",
            "primaryColor": "#f96d4a",
            "accentColor": "#05c7ae",
        },
        "contact": {
            "email": "host@sunnysarajevo.com",
            "phone": "+387 61 123 456",
            "whatsapp": "+387 61 123 456",
            "address": "Ferhadija 15, Sarajevo 71000",
        },
        "active": True,
        "createdAt": _day(2024, 1, 1),
        "updatedAt": _day(2024, 1, 1),
    },
    {
        "id": MOUNTAIN_VIEW,
        "slug": MOUNTAIN_VIEW,
        "name": "Mountain View Lodge",
        "description": _t(
            "Escape to the mountains! Your cozy retreat near Bjelašnica awaits with stunning views and adventure at your doorstep.",
            "Pobegnite u planine! Vaše udobno utočište blizu Bjelašnice čeka sa zadivljujućim pogledima i avanturom na pragu.",
        ),
        "branding": {
            "heroImage": "https://images.unsplash.com/photo-1518780664697-55e3ad937233?w=1600&q=80",
            "primaryColor": "#2d5a27",
            "accentColor": "#8b4513",
        },
        "contact": {
            "email": "info@mountainviewlodge.ba",
            "phone": "+387 62 987 654",
            "address": "Bjelašnica bb, Trnovo 71220",
        },
        "active": True,
        "createdAt": _day(2024, 1, 15),
        "updatedAt": _day(2024, 1, 15),
    },
    {
        "id": DOBRINJA_APARTMENTS,
        "slug": DOBRINJA_APARTMENTS,
        "name": "Dobrinja Apartments",
        "description": _t(
            "Modern comfort meets convenience. Discover our premium services designed to enhance your Sarajevo experience.",
            "Moderna udobnost susreće praktičnost. Otkrijte naše premium usluge dizajnirane da unaprijede vaše sarajevsko iskustvo.",
        ),
        "branding": {
            "heroImage": "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688?w=1600&q=80",
            "primaryColor": "#1e40af",
            "accentColor": "#0891b2",
            # Full white-label
            "hideLogo": True,
        },
        "contact": {
            "email": "info@dobrinja-apartments.ba",
            "phone": "+387 61 555 777",
            "whatsapp": "+387 61 555 777",
            "address": "Dobrinja C5, Sarajevo 71000",
        },
        "active": True,
        "createdAt": _day(2024, 2, 1),
        "updatedAt": _day(2024, 2, 1),
    },
]


def _category(id_: str, order: int, name: dict, description: dict, icon: str, color: str) -> dict[str, Any]:
    return {
        "id": id_,
        "name": name,
        "description": description,
        "icon": icon,
        "color": color,
        "order": order,
        "active": True,
    }


SEED_CATEGORIES: list[dict[str, Any]] = [
    _category(
        "free", 1, _t("Free Amenities", "Besplatne Pogodnosti"),
        _t("Complimentary services and amenities for our guests", "Besplatne usluge i pogodnosti za naše goste"),
        "gift", "emerald",
    ),
    _category(
        "transport", 2, _t("Transport", "Transport"),
        _t("Airport transfers, car rentals, and taxi services", "Aerodromski transferi, rent-a-car i taxi usluge"),
        "car", "blue",
    ),
    _category(
        "tours", 3, _t("Tours & Activities", "Ture i Aktivnosti"),
        _t("Guided tours, day trips, and outdoor adventures", "Vođene ture, jednodnevni izleti i avanture na otvorenom"),
        "mountain", "orange",
    ),
    _category(
        "food", 4, _t("Food & Dining", "Hrana i Restorani"),
        _t("Breakfast, grocery shopping, and dining experiences", "Doručak, kupovina namirnica i gastronomska iskustva"),
        "utensils", "red",
    ),
    _category(
        "special", 5, _t("Special Occasions", "Posebne Prilike"),
        _t("Romantic setups, birthday celebrations, and more", "Romantične pripreme, proslave rođendana i više"),
        "heart", "pink",
    ),
    _category(
        "convenience", 6, _t("Convenience", "Pogodnosti"),
        _t("Shopping runs, pharmacy, laundry, and more", "Kupovina, apoteka, pranje veša i više"),
        "shopping-bag", "indigo",
    ),
    _category(
        "car-services", 7, _t("Car Services", "Auto Usluge"),
        _t("Car wash, detailing, and maintenance", "Pranje auta, detailing i održavanje"),
        "wrench", "slate",
    ),
    _category(
        "photography", 8, _t("Photography", "Fotografija"),
        _t("Professional photo sessions and vacation memories", "Profesionalne foto sesije i uspomene s odmora"),
        "camera", "violet",
    ),
]


def _tier(id_: str, name: dict, price: float, description: dict | None = None) -> dict[str, Any]:
    tier: dict[str, Any] = {"id": id_, "name": name, "price": price}
    if description is not None:
        tier["description"] = description
    return tier


def _service(
    id_: str,
    category_id: str,
    order: int,
    name: dict,
    description: dict,
    short: dict,
    pricing_type: str,
    price: float | None = None,
    tiers: list[dict[str, Any]] | None = None,
    featured: bool = False,
) -> dict[str, Any]:
    service: dict[str, Any] = {
        "id": id_,
        "categoryId": category_id,
        "name": name,
        "description": description,
        "shortDescription": short,
        "pricingType": pricing_type,
        "currency": "EUR",
        "active": True,
        "featured": featured,
        "order": order,
    }
    if price is not None:
        service["price"] = price
    if tiers:
        service["tiers"] = tiers
    return service


_STANDARD = _t("Standard", "Standard")
_PREMIUM = _t("Premium", "Premium")

_SARAJEVO_SERVICES: list[dict[str, Any]] = [
    # Free amenities
    _service(
        "complimentary-water", "free", 1, _t("Complimentary Water", "Besplatna Voda"),
        _t("Fresh bottled water available in your apartment for your convenience",
           "Svježa flaširana voda dostupna u vašem apartmanu za vašu udobnost"),
        _t("Fresh bottled water", "Svježa flaširana voda"), "free",
    ),
    _service(
        "nespresso-coffee", "free", 2, _t("Nespresso Coffee", "Nespresso Kafa"),
        _t("Premium Nespresso coffee capsules for your morning enjoyment",
           "Premium Nespresso kapsule kafe za vaše jutarnje uživanje"),
        _t("Premium coffee capsules", "Premium kapsule kafe"), "free",
    ),
    _service(
        "welcome-snacks", "free", 3, _t("Welcome Snacks", "Grickalice Dobrodošlice"),
        _t("Selection of chocolates and fresh fruits waiting for you",
           "Izbor čokolada i svježeg voća koji vas čekaju"),
        _t("Chocolates & fruits", "Čokolade i voće"), "free",
    ),
    _service(
        "borrowed-items", "free", 4, _t("Borrowed Items", "Posudba Predmeta"),
        _t("Phone chargers, umbrella, iron, and other essentials available to borrow",
           "Punjači za telefon, kišobran, pegla i ostale potrepštine dostupne za posudbu"),
        _t("Chargers, umbrella, iron", "Punjači, kišobran, pegla"), "free",
    ),
    # Transport
    _service(
        "airport-transfer", "transport", 1, _t("Airport Transfer", "Aerodromski Transfer"),
        _t("Comfortable pickup and dropoff from Sarajevo International Airport. Our driver will meet you at arrivals with a name sign.",
           "Udoban prevoz od i do Međunarodnog aerodroma Sarajevo. Naš vozač će vas dočekati na dolasku s tablom s vašim imenom."),
        _t("Airport pickup & dropoff", "Prevoz od/do aerodroma"), "fixed", price=25, featured=True,
    ),
    _service(
        "rent-a-car", "transport", 2, _t("Rent a Car", "Rent-a-Car"),
        _t("Wide selection of vehicles for your travel needs. From economy to premium options.",
           "Širok izbor vozila za vaše potrebe putovanja. Od ekonomskih do premium opcija."),
        _t("Vehicle rental service", "Usluga iznajmljivanja vozila"), "variable", price=35,
        tiers=[
            _tier("standard", _STANDARD, 35, _t("Economy vehicles", "Ekonomska vozila")),
            _tier("premium", _PREMIUM, 55, _t("Luxury vehicles", "Luksuzna vozila")),
        ],
    ),
    _service(
        "taxi-service", "transport", 3, _t("Taxi Service", "Taxi Usluga"),
        _t("Reliable taxi service for getting around the city. Standard or premium options available.",
           "Pouzdana taxi usluga za kretanje po gradu. Dostupne standardne ili premium opcije."),
        _t("City taxi service", "Gradska taxi usluga"), "variable", price=10,
        tiers=[_tier("standard", _STANDARD, 10), _tier("premium", _PREMIUM, 20)],
    ),
    _service(
        "private-driver", "transport", 4, _t("Private Driver", "Privatni Vozač"),
        _t("Personal driver at your disposal for the day. Perfect for sightseeing or business.",
           "Osobni vozač na raspolaganju za cijeli dan. Savršeno za razgledavanje ili poslovanje."),
        _t("Full-day private driver", "Privatni vozač za cijeli dan"), "fixed", price=150,
    ),
    # Tours & activities
    _service(
        "erma-safari", "tours", 1, _t("Erma Safari", "Erma Safari"),
        _t("Exciting safari adventure through beautiful Bosnian nature. Experience wildlife and stunning landscapes.",
           "Uzbudljiva safari avantura kroz prekrasnu bosansku prirodu. Doživite divlje životinje i zadivljujuće pejzaže."),
        _t("Safari adventure experience", "Safari avantura"), "variable", price=45, featured=True,
        tiers=[
            _tier("standard", _STANDARD, 45),
            _tier("premium", _PREMIUM, 75),
            _tier("vip", _t("VIP Package", "VIP Paket"), 120),
        ],
    ),
    _service(
        "day-trip-mostar", "tours", 2, _t("Day Trip - Mostar", "Jednodnevni Izlet - Mostar"),
        _t("Visit the historic city of Mostar and its famous Old Bridge. Includes guided tour and free time.",
           "Posjetite historijski grad Mostar i njegov čuveni Stari most. Uključuje vođenu turu i slobodno vrijeme."),
        _t("Historic Mostar tour", "Tura historijskog Mostara"), "variable", price=65,
        tiers=[
            _tier("standard", _STANDARD, 65),
            _tier("premium", _t("Premium (with lunch)", "Premium (s ručkom)"), 95),
        ],
    ),
    _service(
        "day-trip-konjic", "tours", 3, _t("Day Trip - Konjic & Jablanica", "Jednodnevni Izlet - Konjic i Jablanica"),
        _t("Explore the beautiful towns of Konjic and Jablanica. Visit the famous bridge and enjoy local cuisine.",
           "Istražite prekrasne gradove Konjic i Jablanicu. Posjetite čuveni most i uživajte u lokalnoj kuhinji."),
        _t("Konjic & Jablanica tour", "Tura Konjic i Jablanica"), "fixed", price=55,
    ),
    _service(
        "day-trip-travnik", "tours", 4, _t("Day Trip - Travnik & Jajce", "Jednodnevni Izlet - Travnik i Jajce"),
        _t("Discover the royal cities of Travnik and Jajce. See the famous waterfall and medieval fortress.",
           "Otkrijte kraljevske gradove Travnik i Jajce. Pogledajte čuveni vodopad i srednjovjekovnu tvrđavu."),
        _t("Travnik & Jajce tour", "Tura Travnik i Jajce"), "fixed", price=70,
    ),
    # Food & dining
    _service(
        "breakfast", "food", 1, _t("Breakfast", "Doručak"),
        _t("Delicious breakfast delivered from our partner restaurant. Traditional Bosnian or continental options.",
           "Ukusan doručak dostavljen iz našeg partnerskog restorana. Tradicionalne bosanske ili kontinentalne opcije."),
        _t("Restaurant breakfast delivery", "Dostava doručka iz restorana"), "fixed", price=15,
    ),
    _service(
        "grocery-prestock", "food", 2, _t("Grocery Pre-stock", "Nabavka Namirnica"),
        _t("Have your groceries waiting for you when you arrive. Send us your shopping list and we'll take care of the rest.",
           "Neka vas namirnice čekaju kada stignete. Pošaljite nam listu za kupovinu i mi ćemo se pobrinuti za ostalo."),
        _t("Pre-arrival grocery shopping", "Kupovina namirnica prije dolaska"), "quote",
    ),
    _service(
        "private-chef", "food", 3, _t("Private Chef", "Privatni Kuhar"),
        _t("Enjoy a gourmet dinner prepared by a professional chef in your apartment. Perfect for special occasions.",
           "Uživajte u gurmanskoj večeri koju priprema profesionalni kuhar u vašem apartmanu. Savršeno za posebne prilike."),
        _t("In-apartment dining experience", "Iskustvo večere u apartmanu"), "quote", featured=True,
    ),
    # Special occasions
    _service(
        "romantic-setup", "special", 1, _t("Romantic Setup", "Romantična Priprema"),
        _t("Rose petals, candles, champagne - make your evening unforgettable. Perfect for anniversaries and special dates.",
           "Latice ruža, svijeće, šampanjac - učinite večer nezaboravnom. Savršeno za godišnjice i posebne datume."),
        _t("Romantic evening setup", "Priprema romantične večeri"), "variable", price=50, featured=True,
    ),
    _service(
        "proposal-setup", "special", 2, _t("Proposal Setup", "Priprema za Prosidbu"),
        _t("Make your proposal moment perfect. We'll help you create an unforgettable setting for the big question.",
           "Učinite trenutak prosidbe savršenim. Pomoći ćemo vam stvoriti nezaboravan ambijent za veliko pitanje."),
        _t("Marriage proposal arrangement", "Priprema za prosidbu"), "quote",
    ),
    _service(
        "birthday-setup", "special", 3, _t("Birthday Setup", "Rođendanska Priprema"),
        _t("Surprise your loved one with a birthday celebration. Decorations, cake, and more.",
           "Iznenadite voljenu osobu proslavom rođendana. Dekoracije, torta i više."),
        _t("Birthday celebration setup", "Priprema proslave rođendana"), "variable", price=40,
    ),
    # Convenience
    _service(
        "shopping-run", "convenience", 1, _t("Shopping Run", "Kupovina"),
        _t("We'll pick up whatever you need from local stores. Just send us your list.",
           "Pokupićemo sve što vam treba iz lokalnih trgovina. Samo nam pošaljite listu."),
        _t("Personal shopping service", "Usluga osobne kupovine"), "fixed", price=10,
    ),
    _service(
        "pharmacy-run", "convenience", 2, _t("Pharmacy Run", "Apoteka"),
        _t("Need medication or health products? We'll pick them up for you from the pharmacy.",
           "Trebate lijekove ili zdravstvene proizvode? Pokupićemo ih za vas iz apoteke."),
        _t("Pharmacy pickup service", "Usluga preuzimanja iz apoteke"), "fixed", price=10,
    ),
    _service(
        "currency-exchange", "convenience", 3, _t("Currency Exchange", "Mjenjačnica"),
        _t("Need to exchange currency? We offer competitive rates and convenient service.",
           "Trebate zamijeniti valutu? Nudimo konkurentne tečajeve i praktičnu uslugu."),
        _t("Currency exchange service", "Usluga mjenjačnice"), "quote",
    ),
    # Car services
    _service(
        "car-wash", "car-services", 1, _t("Car Wash", "Pranje Auta"),
        _t("Professional car wash service. We'll pick up your car and return it sparkling clean.",
           "Profesionalna usluga pranja automobila. Pokupićemo vaš auto i vratiti ga blistavo čistog."),
        _t("Professional car wash", "Profesionalno pranje auta"), "fixed", price=20,
    ),
    _service(
        "car-detailing", "car-services", 2, _t("Car Detailing", "Detailing Auta"),
        _t("Complete interior and exterior detailing service for your vehicle.",
           "Kompletna usluga detailinga unutrašnjosti i vanjštine vašeg vozila."),
        _t("Full car detailing", "Kompletan detailing auta"), "fixed", price=50,
    ),
    # Photography
    _service(
        "photographer", "photography", 1, _t("Photographer", "Fotograf"),
        _t("Professional photography services for your special moments in Sarajevo.",
           "Profesionalne fotografske usluge za vaše posebne trenutke u Sarajevu."),
        _t("Professional photography", "Profesionalna fotografija"), "quote",
    ),
]

_MOUNTAIN_SERVICES: list[dict[str, Any]] = [
    _service(
        "mv-firewood", "free", 1, _t("Firewood", "Drva za Kamin"),
        _t("A stacked basket of dry firewood for the lodge fireplace, refilled daily.",
           "Korpa suhih drva za kamin u kući, dopunjava se svakodnevno."),
        _t("Daily fireplace wood", "Drva za kamin svaki dan"), "free",
    ),
    _service(
        "mv-sled-rental", "free", 2, _t("Sleds & Snowshoes", "Sanke i Krplje"),
        _t("Borrow sleds and snowshoes for the slopes around the lodge.",
           "Posudite sanke i krplje za padine oko kuće."),
        _t("Winter gear to borrow", "Zimska oprema za posudbu"), "free",
    ),
    _service(
        "mv-sarajevo-transfer", "transport", 1, _t("Sarajevo Transfer", "Transfer do Sarajeva"),
        _t("Transfer between the lodge and Sarajevo airport or city centre in a 4x4 vehicle.",
           "Transfer između kuće i sarajevskog aerodroma ili centra grada terenskim vozilom."),
        _t("4x4 transfer to Sarajevo", "Terenski transfer do Sarajeva"), "fixed", price=40, featured=True,
    ),
    _service(
        "mv-ski-rental", "tours", 1, _t("Ski Equipment Rental", "Najam Ski Opreme"),
        _t("Skis, boots, poles and helmet delivered to the lodge, fitted by our partner shop.",
           "Skije, pancerice, štapovi i kaciga dostavljeni u kuću, podešeni u partnerskoj radnji."),
        _t("Full ski kit per day", "Kompletna ski oprema po danu"), "variable", price=25, featured=True,
        tiers=[
            _tier("standard", _STANDARD, 25, _t("Recreational kit", "Rekreativna oprema")),
            _tier("premium", _PREMIUM, 40, _t("Performance kit", "Sportska oprema")),
        ],
    ),
    _service(
        "mv-hiking-guide", "tours", 2, _t("Guided Hike to Lukomir", "Vođena Šetnja do Lukomira"),
        _t("Full-day guided hike to Lukomir, the highest village in Bosnia, with a traditional lunch.",
           "Cjelodnevna vođena tura do Lukomira, najvišeg sela u Bosni, uz tradicionalni ručak."),
        _t("Highland village hike", "Šetnja do planinskog sela"), "fixed", price=60,
    ),
    _service(
        "mv-snowmobile", "tours", 3, _t("Snowmobile Tour", "Tura Motornim Sanjkama"),
        _t("Guided snowmobile ride across the Bjelašnica plateau.",
           "Vođena vožnja motornim sanjkama preko platoa Bjelašnice."),
        _t("Snowmobile adventure", "Avantura motornim sanjkama"), "quote",
    ),
    _service(
        "mv-breakfast", "food", 1, _t("Mountain Breakfast", "Planinski Doručak"),
        _t("Homemade cheese, honey, eggs and fresh bread served at the lodge.",
           "Domaći sir, med, jaja i svjež hljeb posluženi u kući."),
        _t("Homemade breakfast", "Domaći doručak"), "fixed", price=12,
    ),
    _service(
        "mv-bbq-dinner", "food", 2, _t("Lodge BBQ Dinner", "Roštilj Večera"),
        _t("Grilled lamb and local specialties prepared on the terrace.",
           "Janjetina i lokalni specijaliteti pripremljeni na terasi."),
        _t("Terrace BBQ", "Roštilj na terasi"), "variable", price=30,
    ),
]


def _for_tenant(services: list[dict[str, Any]], tenant_id: str, id_prefix: str = "") -> list[dict[str, Any]]:
    created = next(t["createdAt"] for t in SEED_TENANTS if t["id"] == tenant_id)
    return [
        {
            **service,
            "id": f"{id_prefix}{service['id']}",
            "tenantId": tenant_id,
            "createdAt": created,
            "updatedAt": created,
        }
        for service in services
    ]


def seed_services() -> list[dict[str, Any]]:
    """All seed services for every tenant (new dicts on each call)."""
    return [
        *_for_tenant(_SARAJEVO_SERVICES, SUNNY_SARAJEVO),
        *_for_tenant(_MOUNTAIN_SERVICES, MOUNTAIN_VIEW),
        *_for_tenant(_SARAJEVO_SERVICES, DOBRINJA_APARTMENTS, id_prefix="dobrinja-"),
    ]
