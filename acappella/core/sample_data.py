"""Static content shown when the store has no records of a kind."""
from acappella.models.record import Event, Member, Song

SAMPLE_MEMBERS = [
    Member(
        id="sample-member-1",
        created_at="",
        name="Davis Rogoncho",
        voice_part="Lead",
        image_url="/images/dav-ron.jpg",
        years_with_group=5,
        testimony="Music has been my way of connecting with God and sharing His love with others.",
    ),
    Member(
        id="sample-member-2",
        created_at="",
        name="Ken Ogetii",
        voice_part="Tenor",
        image_url="/images/ken-1.jpg",
        years_with_group=4,
        testimony="Through a cappella, I've learned that harmony in music reflects harmony in life.",
    ),
    Member(
        id="sample-member-3",
        created_at="",
        name="Ken",
        voice_part="Baritone",
        image_url="/images/ken-2.jpg",
        years_with_group=6,
        testimony="Every performance is an opportunity to minister and touch someone's heart.",
    ),
    Member(
        id="sample-member-4",
        created_at="",
        name="Sydney",
        voice_part="Soprano",
        image_url="/images/sydney.jpg",
        years_with_group=3,
        testimony="The foundation of our music comes from the foundation of our faith.",
    ),
    Member(
        id="sample-member-5",
        created_at="",
        name="Tenor Guy",
        voice_part="Tenor",
        image_url="/images/tenor-guy.jpg",
        years_with_group=2,
        testimony="Singing praises lifts the soul and brings us closer to heaven.",
    ),
    Member(
        id="sample-member-6",
        created_at="",
        name="Bass Man",
        voice_part="Bass",
        image_url="/images/bass-man.jpg",
        years_with_group=4,
        testimony="The deep notes carry the weight of our worship and anchor our harmonies.",
    ),
]

SAMPLE_EVENTS = [
    Event(
        id="sample-event-1",
        created_at="",
        title="Sunday Morning Worship",
        date="2024-03-17",
        time="10:00 AM",
        location="Syokimau Central SDA Church",
        type="Church Service",
        status="confirmed",
        description="Join us for uplifting worship through a cappella ministry music.",
    ),
    Event(
        id="sample-event-2",
        created_at="",
        title="Wedding Ceremony Performance",
        date="2024-03-23",
        time="2:00 PM",
        location="Nairobi Wedding Gardens",
        type="Private Event",
        status="confirmed",
        description="Special performance for Sarah & Michael's wedding ceremony.",
    ),
    Event(
        id="sample-event-3",
        created_at="",
        title="Youth Conference 2024",
        date="2024-04-05",
        time="7:00 PM",
        location="Adventist University of Africa",
        type="Conference",
        status="tentative",
        description="Inspiring young hearts through gospel a cappella music.",
    ),
    Event(
        id="sample-event-4",
        created_at="",
        title="Corporate Dinner Event",
        date="2024-04-12",
        time="6:30 PM",
        location="Serena Hotel, Nairobi",
        type="Corporate Event",
        status="confirmed",
        description="Professional performance for annual company celebration.",
    ),
]

SAMPLE_SONGS = [
    Song(
        id="song-1",
        created_at="",
        title="When They Ring Those Golden Bells",
        audio_url="/audio/Acappella _When They Ring Those Golden Bells_ Rehearsal.mp3",
        duration="4:32",
        category="original",
        description="Our signature arrangement of this beloved hymn",
    ),
    Song(
        id="song-2",
        created_at="",
        title="Ngoika Ka Nka",
        audio_url="/audio/ngoika.mp3",
        duration="5:18",
        category="original",
        description="A powerful rendition of this classic worship song",
    ),
    Song(
        id="song-3",
        created_at="",
        title="The Rock",
        audio_url="/audio/The Rock.mp3",
        duration="3:45",
        category="original",
        description="An uplifting arrangement filled with hope",
    ),
    Song(
        id="cover-1",
        created_at="",
        title="Waymaker - Sinach",
        audio_url="/audio/waymaker.mp3",
        duration="4:15",
        category="cover",
        description="Our a cappella arrangement of this contemporary gospel hit",
    ),
    Song(
        id="cover-2",
        created_at="",
        title="Goodness of God - Bethel Music",
        audio_url="/audio/goodness-of-god.mp3",
        duration="5:02",
        category="cover",
        description="A heartfelt cover of this modern worship anthem",
    ),
    Song(
        id="cover-3",
        created_at="",
        title="What a Beautiful Name - Hillsong",
        audio_url="/audio/beautiful-name.mp3",
        duration="4:28",
        category="cover",
        description="Our unique take on this powerful worship song",
    ),
    # Live performances are video only
    Song(
        id="live-1",
        created_at="",
        title="Sunday Morning Worship - Syokimau Central SDA",
        audio_url="",
        duration="",
        category="live",
        description="Live performance during Sunday morning service",
        youtube_id="dQw4w9WgXcQ",
    ),
    Song(
        id="live-2",
        created_at="",
        title="Youth Conference 2023",
        audio_url="",
        duration="",
        category="live",
        description="Special performance at the annual youth conference",
        youtube_id="dQw4w9WgXcQ",
    ),
    Song(
        id="live-3",
        created_at="",
        title="Wedding Performance - Nairobi",
        audio_url="",
        duration="",
        category="live",
        description="Surprise performance at a beautiful wedding ceremony",
        youtube_id="dQw4w9WgXcQ",
    ),
]
