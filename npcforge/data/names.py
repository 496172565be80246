"""Faction name pools and the per-session name allocator.

First and last names are drawn independently. The allocator remembers
every ``faction:full name`` it has issued so a session never hands out
the same name twice within a faction until the pool is exhausted.
"""

import logging
from dataclasses import dataclass

from npcforge.data.factions import Faction, lookup_gender, normalize_faction
from npcforge.sampling.seeded_random import SeededRandom

logger = logging.getLogger(__name__)

MAX_NAME_ATTEMPTS = 1000

NAME_POOLS: dict[Faction, dict[str, list[str]]] = {
    # Shipwreck survivors, colonial-era names
    Faction.CASTAWAY: {
        "male": [
            "William", "James", "Thomas", "Robert", "John", "Samuel", "Edward", "Henry",
            "Charles", "George", "Richard", "Benjamin", "Daniel", "Joseph", "Michael",
            "Peter", "Jonathan", "Christopher", "Matthew", "Andrew", "Francis", "Anthony",
            "Nicholas", "Timothy", "Stephen", "Philip", "Simon", "Alexander", "David",
            "Frederick", "Albert", "Arthur", "Walter", "Harry", "Louis", "Frank", "Ernest",
            "Clarence", "Theodore", "Eugene", "Raymond", "Harold", "Leonard", "Vincent",
            "Leroy", "Alfred", "Clyde", "Edwin", "Gordon", "Marion",
            "Jasper", "Caleb", "Ethan", "Gideon", "Isaac", "Levi", "Silas",
            "Tobias", "Zachary", "Abraham", "Bartholomew", "Clement", "Darius", "Elias",
            "Felix", "Hiram", "Jethro", "Luther", "Malachi", "Nehemiah", "Phineas",
            "Quentin", "Reuben", "Simeon", "Thaddeus", "Ulysses", "Victor", "Wesley", "Xavier",
            "Oliver", "Patrick", "Quincy", "Randolph", "Stanley", "Trevor", "Upton", "Vaughn",
            "Warren", "Wilbur", "Amos", "Barnabas", "Chester", "Douglas", "Ellis", "Floyd",
            "Gilbert", "Homer", "Irving", "Jerome", "Kenneth", "Lester", "Milton", "Norman",
            "Oscar", "Percy", "Ralph", "Sidney", "Terrence", "Virgil", "Willis", "Ambrose",
            "Bernard", "Calvin", "Cyrus", "Dexter", "Emery", "Francis", "Gerard", "Harvey",
            "Edmund", "Frederick", "Arthur", "Albert", "Ernest", "Walter", "Alfred", "Herbert",
            "Harold", "Leopold", "Augustus", "Reginald", "Percival", "Rupert", "Cecil", "Clive",
            "Basil", "Horace", "Cyril", "Lionel", "Mortimer", "Humphrey", "Godfrey", "Benedict",
            "Cornelius", "Maximilian", "Sebastian", "Thaddeus", "Bartholomew", "Ignatius",
            "Archibald", "Clarence", "Desmond", "Egbert", "Ferdinand", "Giles", "Hugo", "Jasper",
            "Alistair", "Barnaby", "Cedric", "Dunstan", "Eustace", "Fitzwilliam", "Godwin", "Hector",
            "Inigo", "Jerome", "Kendrick", "Lancelot", "Montgomery", "Nigel", "Oswald", "Peregrine",
            "Quinton", "Roderick", "Septimus", "Tobias", "Ulric", "Vivian", "Wilfred", "Xerxes",
            "Yardley", "Ambrose", "Bromley", "Caspar", "Digby", "Everard", "Fulton", "Griffith",
            "Hamish", "Irving", "Jocelyn", "Kenelm", "Ludovic", "Merlin", "Norbert", "Octavius",
        ],
        "female": [
            "Mary", "Elizabeth", "Anne", "Margaret", "Sarah", "Catherine", "Jane", "Emma",
            "Charlotte", "Sophia", "Isabella", "Amelia", "Grace", "Eleanor", "Rebecca",
            "Rachel", "Hannah", "Abigail", "Emily", "Caroline", "Victoria", "Alice",
            "Clara", "Lillian", "Rose", "Helen", "Ruth", "Martha", "Beatrice", "Agnes",
            "Florence", "Harriet", "Lucy", "Mabel", "Nora", "Olive", "Pearl", "Ruby",
            "Stella", "Vera", "Willa", "Zoe", "Adeline", "Cecilia", "Daphne", "Evelyn",
            "Felicity", "Genevieve", "Helena", "Irene", "Josephine", "Katherine", "Lydia",
            "Matilda", "Nadine", "Ophelia", "Priscilla", "Quinn", "Rosalind", "Sylvia",
            "Theresa", "Ursula", "Vivian", "Adelaide", "Bernadette", "Constance", "Diana",
            "Edith", "Frances", "Gwendolyn", "Hazel", "Iris", "Juliet", "Kathryn", "Laura",
            "Miriam", "Naomi", "Octavia", "Penelope", "Rosemary", "Susannah", "Tabitha",
            "Violet", "Winifred", "Yvonne", "Alma", "Blanche", "Cora", "Della", "Elsie",
            "Flora", "Gladys", "Hattie", "Ida", "June", "Kitty", "Lena", "May",
            "Adelaide", "Beatrice", "Constance", "Dorothy", "Edith", "Florence", "Gertrude",
            "Harriet", "Imogen", "Josephine", "Katherine", "Lavinia", "Millicent", "Octavia",
            "Penelope", "Prudence", "Rosalind", "Tabitha", "Ursula", "Violet", "Winifred",
            "Arabella", "Cordelia", "Gwendolyn", "Henrietta", "Meredith", "Philippa", "Theodora",
            "Agatha", "Blanche", "Cecilia", "Daphne", "Estelle", "Felicity", "Georgiana", "Hyacinth",
            "Isolde", "Jocasta", "Keturah", "Lucinda", "Marigold", "Nerissa", "Ondine", "Petronilla",
            "Quintessa", "Rowena", "Seraphina", "Thomasina", "Venetia", "Wilhelmina", "Xanthe", "Yseult",
            "Zinnia", "Annabella", "Belinda", "Clementine", "Delphine", "Eugenia", "Fidelia", "Griselda",
            "Honoria", "Ismena", "Jessamine", "Lettice", "Marcelline", "Nerissa", "Olympia", "Perpetua",
        ],
        "last": [
            "Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis", "Wilson",
            "Moore", "Taylor", "Anderson", "Thomas", "Jackson", "White", "Harris", "Martin",
            "Thompson", "Garcia", "Martinez", "Robinson", "Clark", "Rodriguez", "Lewis",
            "Lee", "Walker", "Hall", "Allen", "Young", "King", "Wright", "Scott", "Green",
            "Baker", "Adams", "Nelson", "Carter", "Mitchell", "Roberts", "Turner", "Phillips",
            "Campbell", "Parker", "Evans", "Edwards", "Collins", "Stewart", "Morris", "Cook",
            "Rogers", "Morgan", "Bell", "Murphy", "Bailey", "Cooper", "Reed", "Ward", "Cox",
            "Howard", "Richardson", "Wood", "Watson", "Brooks", "Kelly", "Sanders", "Price",
            "Bennett", "Gray", "James", "Rivera", "Watkins", "Foster", "Gonzalez", "Bryant",
            "Alexander", "Russell", "Griffin", "Diaz", "Hayes",
            "Myers", "Ford", "Hamilton", "Graham", "Sullivan", "Wallace", "Woods", "Cole",
            "West", "Jordan", "Owens", "Reynolds", "Fisher", "Ellis", "Harrison", "Gibson",
            "McDonald", "Cruz", "Marshall", "Ortiz", "Gomez", "Murray", "Freeman", "Wells",
            "Webb", "Simpson", "Stevens", "Tucker", "Porter", "Hunter", "Hicks", "Crawford",
            "Henry", "Boyd", "Mason", "Morales", "Kennedy", "Warren", "Dixon", "Ramos",
            "Reyes", "Burns", "Gordon", "Shaw", "Holmes", "Rice", "Robertson", "Hunt",
            "Black", "Daniels", "Palmer", "Mills", "Nichols", "Grant", "Knight", "Ferguson",
            "Rose", "Stone", "Hawkins", "Dunn", "Perkins", "Hudson", "Spencer", "Gardner",
            "Ashworth", "Blackwood", "Carrington", "Drummond", "Fairfax", "Gladstone", "Harrington",
            "Kensington", "Lancaster", "Montague", "Pembroke", "Radcliffe", "Sutherland", "Waverly",
            "Beaumont", "Chatsworth", "Dunbar", "Ellington", "Fitzgerald", "Grosvenor", "Huntington",
            "Kingston", "Livingstone", "Montgomery", "Ponsonby", "Ravenswood", "Stratford", "Wellington",
            "Ashford", "Beckett", "Caldwell", "Davenport", "Ellsworth", "Finch", "Goodwin", "Hastings",
            "Irving", "Jameson", "Kendall", "Lawson", "Merrick", "Norton", "Preston", "Quincy",
            "Radley", "Sinclair", "Thornton", "Winthrop", "Ashby", "Barlow", "Clifton", "Dresden",
            "Emerson", "Fletcher", "Grantham", "Holbrook", "Kingsley", "Maxwell", "Pritchard", "Sheffield",
            "Worthington", "Aldridge", "Blackburn", "Cheltenham", "Devonshire", "Edgeworth", "Fenwick", "Gloucester",
            "Harrowgate", "Islington", "Jarvis", "Kensington", "Langford", "Maidstone", "Norwood", "Oakley",
            "Paddington", "Queensbury", "Rothwell", "Salisbury", "Twickenham", "Uppingham", "Vauxhall", "Whitehall",
            "Yarmouth", "Ashcroft", "Bridgewater", "Chadwick", "Danvers", "Eastwood", "Fairchild", "Greenwood",
            "Hawthorne", "Ironwood", "Jarrett", "Kimberly", "Lockwood", "Marlowe", "Nightingale", "Overbrook",
        ],
    },
    # Islanders; both clans share one pool
    Faction.NATIVE: {
        "male": [
            "Koa", "Kai", "Nalu", "Keanu", "Makoa", "Keahi", "Ikaika", "Tane",
            "Kane", "Keoni", "Liko", "Manoa", "Akoni", "Kaimana", "Kaleo", "Pika",
            "Alika", "Lopaka", "Maka", "Alapai", "Ekewaka", "Haukea", "Kapena", "Kawika",
            "Keola", "Kiele", "Konane", "Mahiai", "Makani", "Palani", "Pono", "Uluwehi",
            "Kahoku", "Kale", "Kamea", "Kapono", "Kaui", "Keaka", "Kelii",
            "Keonimana", "Kuulei", "Lono", "Makaio", "Mana", "Nainoa", "Noelani",
            "Olakino", "Palakiko", "Puana", "Wahinekoa", "Ailani", "Anuhea", "Haunani", "Hiapo",
            "Hoaloha", "Iolana", "Kahale", "Kaimi", "Kaiwi", "Kamaka", "Kanoa", "Kekoa",
            "Keoki", "Lanakila", "Makai", "Maleko", "Ohana", "Pulama",
        ],
        "female": [
            "Lani", "Malia", "Leilani", "Nalani", "Mahina", "Ailani", "Hoku", "Kalani",
            "Moana", "Nani", "Pele", "Hina", "Kailani", "Noelani", "Palila", "Waimea",
            "Halia", "Iolana", "Liona", "Mele", "Nohea", "Ulani", "Emi", "Haunani",
            "Kawai", "Nalei", "Oliana", "Pualani", "Tahiti", "Wailani", "Anela", "Ipo",
            "Kaila", "Kona", "Maiha", "Naia", "Okalani", "Pohai", "Ualani", "Wikolia",
            "Alana", "Aukai", "Halona", "Ilima", "Kahiau", "Kaimana", "Kalena", "Keala",
            "Keanu", "Kiele", "Lana", "Lehua", "Lilinoe", "Makana", "Malana", "Mililani",
            "Nohealani", "Olina", "Paloma", "Pilikai", "Pilialoha", "Pua", "Puanani", "Uluwena",
            "Waialani", "Wainani", "Alohi", "Eleu", "Iwalani",
        ],
        "last": [
            "Kahale", "Kealoha", "Akana", "Kamaka", "Mahoe", "Nui", "Palakiko", "Wahine",
            "Alani", "Hoapili", "Kaeo", "Lilinoe", "Manu", "Noho", "Paki", "Uluwehi",
            "Aea", "Hoku", "Kahalewai", "Lono", "Mahelona", "Nahale", "Palani", "Waiwaiole",
            "Aikane", "Hanohano", "Kanaloa", "Loe", "Makani", "Ohana", "Pukui", "Wikoli",
            "Ahina", "Hauoli", "Kanoa", "Lua", "Malama", "Olelo", "Pueo", "Wili",
            "Alohi", "Hele", "Kapule", "Lutu", "Mana", "Olina", "Puna", "Waipuna",
            "Aniani", "Hoomana", "Kauwila", "Mahalo", "Mele", "Palauni", "Ulupono", "Waena",
            "Apikalia", "Ikaika", "Kekoa", "Makua", "Nohili", "Palea", "Uluaki", "Walina",
            "Aiona", "Hale", "Kama", "Lana", "Moana", "Nalu", "Pele", "Wai",
            "Akau", "Hina", "Kani", "Lani", "Moku", "Ola", "Pono", "Wiki",
            "Ao", "Hikina", "Kau", "Lei", "Momi", "Onaona", "Pua", "Wela",
            "Aloha", "Honu", "Kekai", "Loa", "Mauka", "Pali", "Uhane", "Wana",
            "Aukai", "Hokulani", "Kekela", "Lua", "Mele", "Pohaku", "Waipio", "Aina",
            "Hele", "Kiele", "Lokahi", "Malie", "Piko", "Wailuku", "Alaka", "Holo",
        ],
    },
    # Blacksteel contractors, multinational with call signs
    Faction.MERCENARY: {
        "male": [
            "Jack", "Mike", "Ryan", "Alex", "Chris", "Sean", "Kyle", "Brandon",
            "Derek", "Travis", "Tyler", "Jason", "Kevin", "Marcus", "Jake", "Nick",
            "Cole", "Blake", "Shane", "Brett", "Chase", "Hunter", "Austin", "Logan",
            "Connor", "Wyatt", "Mason", "Carter", "Evan", "Owen", "Luke", "Nathan",
            "Ivan", "Dmitri", "Alexei", "Viktor", "Sergei", "Nikolai", "Boris", "Yuri",
            "Andre", "Marcel", "Pierre", "Jean", "Luc", "Henri", "Remy", "Olivier",
            "Hans", "Klaus", "Otto", "Franz", "Werner", "Gunter", "Dieter", "Helmut",
            "Carlos", "Diego", "Miguel", "Pablo", "Rafael", "Antonio", "Jose", "Luis",
            "Hassan", "Omar", "Khalid", "Tariq", "Malik", "Rashid", "Jamal", "Faisal",
            "Chen", "Wei", "Li", "Zhang", "Wang", "Liu", "Yang", "Huang",
            "Raj", "Vikram", "Arjun", "Rohan", "Karan", "Aditya", "Dev", "Kabir",
            "Takeshi", "Kenji", "Hiroshi", "Ryu", "Satoshi", "Koji", "Hideo", "Makoto",
            "Jack", "Billy", "Tom", "Jim", "Sam", "Will", "Ned", "Ben", "Jake", "Pete",
            "Calico", "Black", "Red", "Long", "Dead", "Dutch", "One-Eye", "Peg-Leg", "Hook",
            "Jolly", "Mad", "Wild", "Bloody", "Iron", "Silver", "Gold", "Brass", "Cutlass",
            "Storm", "Thunder", "Shark", "Raven", "Crow", "Hawk", "Morgan", "Teach", "Kidd",
            "Cutthroat", "Scurvy", "Salty", "Barnacle", "Deadshot", "Quickdraw", "Hooks", "Bones",
            "Flint", "Drake", "Hawkeye", "Ironside", "Jaws", "Knuckles", "Lefty", "Moody",
            "Nick", "Old", "Powder", "Rusty", "Scarface", "Tattered", "Ugly", "Vicious",
            "Wicked", "Young", "Blackjack", "Crimson", "Dagger", "Eagle-Eye", "Firebrand", "Grizzled",
            "Hammerhead", "Ironjaw", "Jackal", "Knifey", "Longshot", "Mangy", "Notch", "Orcus",
        ],
        "female": [
            "Sarah", "Jessica", "Ashley", "Emily", "Rachel", "Nicole", "Jennifer", "Amanda",
            "Michelle", "Melissa", "Stephanie", "Rebecca", "Laura", "Kimberly", "Danielle", "Amy",
            "Samantha", "Kelly", "Andrea", "Angela", "Lisa", "Megan", "Heather", "Shannon",
            "Taylor", "Jordan", "Morgan", "Riley", "Casey", "Avery", "Quinn", "Blake",
            "Natasha", "Svetlana", "Olga", "Irina", "Elena", "Katya", "Anya", "Nadia",
            "Marie", "Sophie", "Claire", "Elise", "Camille", "Gabrielle", "Isabelle", "Monique",
            "Greta", "Heidi", "Petra", "Ursula", "Ingrid", "Astrid", "Marlene", "Britta",
            "Carmen", "Isabella", "Rosa", "Lucia", "Sofia", "Elena", "Maria", "Ana",
            "Fatima", "Amira", "Layla", "Zahra", "Noor", "Aisha", "Yasmin", "Leila",
            "Mei", "Ling", "Yan", "Xiu", "Li", "Fang", "Jing", "Hui",
            "Priya", "Anjali", "Kavita", "Neha", "Pooja", "Riya", "Sana", "Tara",
            "Yuki", "Sakura", "Hana", "Akira", "Emi", "Kaori", "Mika", "Rei",
            "Anne", "Mary", "Grace", "Bonny", "Scarlet", "Ruby", "Pearl", "Jade", "Amber",
            "Black", "Red", "Storm", "Tempest", "Raven", "Coral", "Lightning", "Eagle",
            "Mad", "Wild", "Bloody", "Iron", "Silver", "Gold", "Siren", "Vixen", "Cutlass",
            "Rose", "Jolly", "Lucky", "Sharp", "Swift", "Fierce", "Blade", "Fury", "Hawk",
            "Bella", "Crimson", "Dusk", "Emerald", "Fang", "Gale", "Hex", "Ivory",
            "Jasmine", "Kestrel", "Luna", "Mist", "Onyx", "Phoenix", "Rogue", "Sapphire",
            "Thorn", "Venom", "Whisper", "Azure", "Blaze", "Cinder", "Dawn", "Echo",
            "Frost", "Grim", "Haze", "Iris", "Jinx", "Karma", "Lotus", "Midnight",
        ],
        "last": [
            "Smith", "Johnson", "Williams", "Brown", "Jones", "Miller", "Davis", "Wilson",
            "Moore", "Taylor", "Anderson", "Jackson", "White", "Harris", "Martin", "Garcia",
            "Thompson", "Martinez", "Robinson", "Clark", "Rodriguez", "Lewis", "Walker", "Hall",
            "Petrov", "Ivanov", "Volkov", "Sokolov", "Kozlov", "Novikov", "Morozov", "Popov",
            "Dubois", "Lefebvre", "Martin", "Bernard", "Moreau", "Laurent", "Simon", "Michel",
            "Mueller", "Schmidt", "Schneider", "Fischer", "Weber", "Meyer", "Wagner", "Becker",
            "Hernandez", "Lopez", "Gonzalez", "Perez", "Sanchez", "Ramirez", "Torres", "Rivera",
            "Hassan", "Ali", "Ahmed", "Khan", "Mahmoud", "Hussein", "Rashid", "Sharif",
            "Chen", "Wang", "Li", "Zhang", "Liu", "Yang", "Huang", "Zhao",
            "Patel", "Singh", "Kumar", "Sharma", "Reddy", "Gupta", "Verma", "Shah",
            "Tanaka", "Suzuki", "Takahashi", "Watanabe", "Yamamoto", "Nakamura", "Kobayashi", "Sato",
            "Black", "Stone", "Steel", "Cross", "Fox", "Wolf", "Hawk", "Hunter",
            "Graves", "Kane", "Storm", "Knight", "Frost", "Rivers", "Burns", "West",
            "Bonney", "Rackham", "Teach", "Blackbeard", "Redbeard", "Morgan", "Kidd", "Flint",
            "Silver", "Hawkins", "Smollett", "Trelawney", "Roberts", "Bartholomew", "Calico", "Vane",
            "The Red", "The Black", "The Bold", "The Bloody", "The Mad", "The Wild", "No-Mercy",
            "Ironhand", "Steelgaze", "Sharktooth", "Seadevil", "Stormrider", "Wavecutter", "Reefbreaker",
            "Bloodsail", "Blackflag", "Skullcrusher", "Bonecruncher", "Throatslitter", "Backstabber",
            "Cutlass", "Sabre", "Dagger", "Dirk", "Rapier", "Scimitar", "Cleaver", "Hatchet",
            "Grog", "Rum", "Whiskey", "Gin", "Brandy", "Ale", "Tankard", "Swill",
            "Barnacle", "Scurvy", "Pox", "Plague", "Scab", "Scar", "Stump", "Gimp",
            "The Cruel", "The Fierce", "The Merciless", "The Ruthless", "The Savage", "The Terrible", "The Vile",
            "Blackheart", "Coldsteel", "Darksail", "Evileye", "Firebrand", "Grimskull", "Hardtack",
            "Ironhook", "Jollyroger", "Keelhauler", "Longshanks", "Murdock", "Nightshade", "Oakum",
            "Plunderer", "Quickblade", "Raider", "Scallywag", "Tidecaller", "Undertow", "Vengeance",
            "Weatherby", "Crossbones", "Deadwater", "Executioner", "Freebooter", "Gallows", "Harpooner",
        ],
    },
}


@dataclass(frozen=True)
class NameRecord:
    """A generated name."""

    first_name: str
    last_name: str
    full_name: str


@dataclass
class NameStats:
    """Name-space usage for one faction."""

    faction: Faction
    male_combinations: int
    female_combinations: int
    total_combinations: int
    used: int
    available: int
    percent_used: float


def _name_key(faction: Faction, full_name: str) -> str:
    return f"{faction.value}:{full_name}"


class NameAllocator:
    """Issues faction names that do not repeat within a session.

    The used-name set is plain data: ``used_names()`` and
    ``load_used_names()`` round-trip it through a save payload.
    """

    def __init__(self, used_names: list[str] | None = None) -> None:
        self._used: set[str] = set(used_names or [])

    def generate_name(
        self,
        faction: Faction | str,
        gender: str | None,
        rng: SeededRandom,
    ) -> NameRecord:
        """Draw an unused first/last name pair for the faction.

        Each attempt consumes two draws (first name, then last name).
        After MAX_NAME_ATTEMPTS collisions a duplicate is returned with a
        warning instead of failing.

        Args:
            faction: Faction or raw identifier.
            gender: Character gender; anything but ``male`` reads the
                female pool.
            rng: Random source.

        Returns:
            NameRecord, already marked used when it was unique.
        """
        faction = normalize_faction(faction)
        pools = NAME_POOLS[faction]
        first_pool = pools[lookup_gender(gender)]
        last_pool = pools["last"]

        for _ in range(MAX_NAME_ATTEMPTS):
            first = rng.choice(first_pool)
            last = rng.choice(last_pool)
            full_name = f"{first} {last}"
            key = _name_key(faction, full_name)
            if key not in self._used:
                self._used.add(key)
                return NameRecord(first_name=first, last_name=last, full_name=full_name)

        logger.warning("All name combinations exhausted for faction %s", faction.value)
        first = rng.choice(first_pool)
        last = rng.choice(last_pool)
        return NameRecord(first_name=first, last_name=last, full_name=f"{first} {last}")

    def mark_used(self, faction: Faction | str, full_name: str) -> None:
        """Record a name issued elsewhere, e.g. by a loaded save."""
        self._used.add(_name_key(normalize_faction(faction), full_name))

    def is_used(self, faction: Faction | str, full_name: str) -> bool:
        return _name_key(normalize_faction(faction), full_name) in self._used

    def used_names(self) -> list[str]:
        """Return the used-name keys, sorted for stable saves."""
        return sorted(self._used)

    def load_used_names(self, used_names: list[str] | None) -> None:
        """Replace the used-name set."""
        self._used = set(used_names or [])

    def clear(self) -> None:
        self._used.clear()

    def stats(self, faction: Faction | str) -> NameStats:
        """Report combination counts and usage for a faction."""
        faction = normalize_faction(faction)
        pools = NAME_POOLS[faction]
        male = len(pools["male"]) * len(pools["last"])
        female = len(pools["female"]) * len(pools["last"])
        total = male + female
        prefix = f"{faction.value}:"
        used = sum(1 for key in self._used if key.startswith(prefix))
        return NameStats(
            faction=faction,
            male_combinations=male,
            female_combinations=female,
            total_combinations=total,
            used=used,
            available=total - used,
            percent_used=round(used / total * 100, 2),
        )

    def all_stats(self) -> dict[Faction, NameStats]:
        return {faction: self.stats(faction) for faction in Faction}

    def __len__(self) -> int:
        return len(self._used)
