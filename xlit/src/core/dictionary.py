"""Phrase dictionary: per-language phrase -> canonical English.

The forward (English -> language) index is derived from these tables; when
several phrases share an English meaning the first one listed is the one
produced in that direction.
"""

from __future__ import annotations

from .languages import LanguageId

L = LanguageId

PHRASES = {
    L.HINDI: {
        'नमस्ते': 'hello', 'धन्यवाद': 'thank you', 'हाँ': 'yes', 'नहीं': 'no',
        'कृपया': 'please', 'माफ़ करें': 'sorry', 'सुप्रभात': 'good morning', 'शुभ प्रभात': 'good morning',
        'शुभ रात्रि': 'good night', 'शुभ संध्या': 'good evening',
        'आप कैसे हैं': 'how are you', 'कैसे हो': 'how are you', 'क्या हाल है': 'how are you',
        'मैं ठीक हूँ': 'i am fine', 'आप कहाँ हैं': 'where are you', 'आप कहाँ से हैं': 'where are you from',
        'आपका नाम क्या है': 'what is your name', 'मुझे पसंद है': 'i like',
        'बहुत अच्छा': 'very good', 'बहुत बढ़िया': 'great', 'मिलकर खुशी हुई': 'nice to meet you',
        'फिर मिलेंगे': 'see you again', 'बाद में मिलते हैं': 'see you later', 'जल्द ही मिलेंगे': 'see you soon',
        'अपना ख्याल रखना': 'take care', 'आपका दिन शुभ हो': 'have a nice day',
        'मैं तुमसे प्यार करता हूँ': 'i love you', 'मुझे तुम्हारी याद आती है': 'i miss you',
        'अलविदा': 'goodbye', 'ठीक है': 'okay', 'अच्छा': 'good', 'बुरा': 'bad',
        'प्यार': 'love', 'दोस्त': 'friend', 'परिवार': 'family', 'खाना': 'food', 'पानी': 'water',
        'घर': 'home', 'काम': 'work', 'समय': 'time', 'आज': 'today', 'कल': 'tomorrow',
        'मैं': 'i', 'आप': 'you', 'भाई': 'brother', 'बहन': 'sister', 'माँ': 'mother', 'पिता': 'father',
    },
    L.BENGALI: {
        'নমস্কার': 'hello', 'ধন্যবাদ': 'thank you', 'হ্যাঁ': 'yes', 'না': 'no',
        'দয়া করে': 'please', 'দুঃখিত': 'sorry', 'সুপ্রভাত': 'good morning',
        'শুভ রাত্রি': 'good night', 'কেমন আছেন': 'how are you', 'আমি ভালো আছি': 'i am fine',
        'আপনি কোথায়': 'where are you', 'ভালোবাসা': 'love', 'বন্ধু': 'friend',
        'পরিবার': 'family', 'খাবার': 'food', 'জল': 'water', 'বাড়ি': 'home', 'ভালো': 'good',
    },
    L.TELUGU: {
        'నమస్కారం': 'hello', 'ధన్యవాదాలు': 'thank you', 'అవును': 'yes', 'కాదు': 'no',
        'దయచేసి': 'please', 'క్షమించండి': 'sorry', 'శుభోదయం': 'good morning',
        'శుభ రాత్రి': 'good night', 'మీరు ఎలా ఉన్నారు': 'how are you', 'బాగున్నారా': 'how are you',
        'నేను బాగున్నాను': 'i am fine', 'మీరు ఎక్కడ ఉన్నారు': 'where are you',
        'మీ పేరు ఏమిటి': 'what is your name', 'చాలా బాగుంది': 'very good', 'బాగుంది': 'good',
        'మళ్ళీ కలుద్దాం': 'see you again', 'జాగ్రత్త': 'take care',
        'నేను నిన్ను ప్రేమిస్తున్నాను': 'i love you',
        'ప్రేమ': 'love', 'స్నేహితుడు': 'friend', 'కుటుంబం': 'family', 'భోజనం': 'food',
        'నీరు': 'water', 'ఇల్లు': 'home', 'పని': 'work', 'సమయం': 'time', 'ఈరోజు': 'today', 'రేపు': 'tomorrow',
        'నేను': 'i', 'మీరు': 'you', 'అమ్మ': 'mother', 'నాన్న': 'father',
    },
    L.MARATHI: {
        'नमस्कार': 'hello', 'धन्यवाद': 'thank you', 'हो': 'yes', 'नाही': 'no',
        'कृपया': 'please', 'माफ करा': 'sorry', 'शुभ प्रभात': 'good morning',
        'शुभ रात्री': 'good night', 'तुम्ही कसे आहात': 'how are you',
        'मी ठीक आहे': 'i am fine', 'प्रेम': 'love', 'मित्र': 'friend', 'पाणी': 'water', 'घर': 'home',
    },
    L.TAMIL: {
        'வணக்கம்': 'hello', 'நன்றி': 'thank you', 'ஆம்': 'yes', 'இல்லை': 'no',
        'தயவுசெய்து': 'please', 'மன்னிக்கவும்': 'sorry', 'காலை வணக்கம்': 'good morning',
        'இரவு வணக்கம்': 'good night', 'நீங்கள் எப்படி இருக்கிறீர்கள்': 'how are you',
        'எப்படி இருக்கீங்க': 'how are you',
        'நான் நன்றாக இருக்கிறேன்': 'i am fine', 'உங்கள் பெயர் என்ன': 'what is your name',
        'காதல்': 'love', 'நண்பர்': 'friend', 'குடும்பம்': 'family', 'உணவு': 'food',
        'தண்ணீர்': 'water', 'வீடு': 'home', 'வேலை': 'work', 'இன்று': 'today', 'நாளை': 'tomorrow',
        'நான்': 'i', 'நீங்கள்': 'you', 'அம்மா': 'mother', 'அப்பா': 'father',
    },
    L.URDU: {
        'السلام علیکم': 'hello', 'شکریہ': 'thank you', 'ہاں': 'yes', 'نہیں': 'no',
        'براہ کرم': 'please', 'معاف کیجیے': 'sorry', 'صبح بخیر': 'good morning',
        'شب بخیر': 'good night', 'آپ کیسے ہیں': 'how are you',
        'میں ٹھیک ہوں': 'i am fine', 'محبت': 'love', 'دوست': 'friend', 'پانی': 'water', 'گھر': 'home',
    },
    L.GUJARATI: {
        'નમસ્તે': 'hello', 'આભાર': 'thank you', 'હા': 'yes', 'ના': 'no',
        'કૃપા કરીને': 'please', 'માફ કરશો': 'sorry', 'સુપ્રભાત': 'good morning',
        'શુભ રાત્રી': 'good night', 'તમે કેમ છો': 'how are you', 'કેમ છો': 'how are you',
        'હું સારું છું': 'i am fine', 'પ્રેમ': 'love', 'મિત્ર': 'friend', 'પાણી': 'water', 'ઘર': 'home',
    },
    L.KANNADA: {
        'ನಮಸ್ಕಾರ': 'hello', 'ಧನ್ಯವಾದ': 'thank you', 'ಹೌದು': 'yes', 'ಇಲ್ಲ': 'no',
        'ದಯವಿಟ್ಟು': 'please', 'ಕ್ಷಮಿಸಿ': 'sorry', 'ಶುಭೋದಯ': 'good morning',
        'ಶುಭ ರಾತ್ರಿ': 'good night', 'ನೀವು ಹೇಗಿದ್ದೀರಿ': 'how are you',
        'ನಾನು ಚೆನ್ನಾಗಿದ್ದೇನೆ': 'i am fine', 'ಪ್ರೀತಿ': 'love', 'ಸ್ನೇಹಿತ': 'friend',
        'ನೀರು': 'water', 'ಮನೆ': 'home', 'ಕೆಲಸ': 'work', 'ಊಟ': 'food',
    },
    L.ODIA: {
        'ନମସ୍କାର': 'hello', 'ଧନ୍ୟବାଦ': 'thank you', 'ହଁ': 'yes', 'ନା': 'no',
        'ଦୟାକରି': 'please', 'କ୍ଷମା କରନ୍ତୁ': 'sorry', 'ସୁପ୍ରଭାତ': 'good morning',
        'ଶୁଭ ରାତ୍ରି': 'good night', 'ଆପଣ କେମିତି ଅଛନ୍ତି': 'how are you',
        'ମୁଁ ଭଲ ଅଛି': 'i am fine', 'ପ୍ରେମ': 'love', 'ବନ୍ଧୁ': 'friend',
    },
    L.PUNJABI: {
        'ਸਤ ਸ੍ਰੀ ਅਕਾਲ': 'hello', 'ਧੰਨਵਾਦ': 'thank you', 'ਹਾਂ': 'yes', 'ਨਹੀਂ': 'no',
        'ਕਿਰਪਾ ਕਰਕੇ': 'please', 'ਮਾਫ਼ ਕਰਨਾ': 'sorry', 'ਸ਼ੁਭ ਸਵੇਰ': 'good morning',
        'ਸ਼ੁਭ ਰਾਤ': 'good night', 'ਤੁਸੀਂ ਕਿਵੇਂ ਹੋ': 'how are you', 'ਕੀ ਹਾਲ ਹੈ': 'how are you',
        'ਮੈਂ ਠੀਕ ਹਾਂ': 'i am fine', 'ਪਿਆਰ': 'love', 'ਦੋਸਤ': 'friend', 'ਪਾਣੀ': 'water', 'ਘਰ': 'home',
    },
    L.MALAYALAM: {
        'നമസ്കാരം': 'hello', 'നന്ദി': 'thank you', 'അതെ': 'yes', 'ഇല്ല': 'no',
        'ദയവായി': 'please', 'ക്ഷമിക്കണം': 'sorry', 'സുപ്രഭാതം': 'good morning',
        'ശുഭ രാത്രി': 'good night', 'സുഖമാണോ': 'how are you',
        'എനിക്ക് സുഖമാണ്': 'i am fine', 'സ്നേഹം': 'love', 'സുഹൃത്ത്': 'friend',
        'വെള്ളം': 'water', 'വീട്': 'home',
    },
    L.ASSAMESE: {
        'নমস্কাৰ': 'hello', 'ধন্যবাদ': 'thank you', 'হয়': 'yes', 'নহয়': 'no',
        'অনুগ্ৰহ কৰি': 'please', 'ক্ষমা কৰিব': 'sorry', 'সুপ্ৰভাত': 'good morning',
        'শুভ ৰাত্ৰি': 'good night', 'আপুনি কেনে আছে': 'how are you',
        'মই ভালে আছোঁ': 'i am fine', 'প্ৰেম': 'love', 'বন্ধু': 'friend',
    },
    L.NEPALI: {
        'नमस्ते': 'hello', 'धन्यवाद': 'thank you', 'हो': 'yes', 'होइन': 'no',
        'कृपया': 'please', 'माफ गर्नुहोस्': 'sorry', 'शुभ प्रभात': 'good morning',
        'शुभ रात्रि': 'good night', 'तपाईंलाई कस्तो छ': 'how are you',
        'म ठीक छु': 'i am fine', 'माया': 'love', 'साथी': 'friend',
    },
    L.SINHALA: {
        'ආයුබෝවන්': 'hello', 'ස්තූතියි': 'thank you', 'ඔව්': 'yes', 'නැහැ': 'no',
        'කරුණාකර': 'please', 'සමාවෙන්න': 'sorry', 'සුභ උදෑසනක්': 'good morning',
        'කොහොමද': 'how are you', 'මම හොඳින්': 'i am fine', 'ආදරය': 'love', 'යාළුවා': 'friend',
    },
    L.CHINESE: {
        '你好': 'hello', '谢谢': 'thank you', '是': 'yes', '不': 'no',
        '请': 'please', '对不起': 'sorry', '早上好': 'good morning',
        '晚安': 'good night', '你好吗': 'how are you', '我很好': 'i am fine',
        '爱': 'love', '朋友': 'friend', '家人': 'family', '食物': 'food',
        '水': 'water', '家': 'home', '工作': 'work', '时间': 'time',
    },
    L.JAPANESE: {
        'こんにちは': 'hello', 'ありがとう': 'thank you', 'はい': 'yes', 'いいえ': 'no',
        'お願いします': 'please', 'すみません': 'sorry', 'おはようございます': 'good morning',
        'おやすみなさい': 'good night', 'お元気ですか': 'how are you',
        '元気です': 'i am fine', '愛': 'love', '友達': 'friend',
    },
    L.KOREAN: {
        '안녕하세요': 'hello', '감사합니다': 'thank you', '네': 'yes', '아니요': 'no',
        '제발': 'please', '미안합니다': 'sorry', '좋은 아침': 'good morning',
        '안녕히 주무세요': 'good night', '어떻게 지내세요': 'how are you',
        '잘 지내요': 'i am fine', '사랑': 'love', '친구': 'friend',
    },
    L.SPANISH: {
        'hola': 'hello', 'gracias': 'thank you', 'sí': 'yes', 'no': 'no',
        'por favor': 'please', 'lo siento': 'sorry', 'buenos días': 'good morning',
        'buenas tardes': 'good afternoon', 'buenas noches': 'good night',
        'cómo estás': 'how are you', 'como estas': 'how are you', 'estoy bien': 'i am fine',
        'cómo te llamas': 'what is your name', 'de dónde eres': 'where are you from',
        'te quiero': 'i love you', 'te extraño': 'i miss you',
        'hasta luego': 'see you later', 'hasta pronto': 'see you soon', 'cuídate': 'take care',
        'que tengas un buen día': 'have a nice day', 'adiós': 'goodbye',
        'bien': 'okay', 'genial': 'great', 'bueno': 'good', 'malo': 'bad',
        'amor': 'love', 'amigo': 'friend', 'familia': 'family', 'comida': 'food',
        'agua': 'water', 'casa': 'home', 'trabajo': 'work', 'hoy': 'today', 'mañana': 'tomorrow',
        'yo': 'i', 'tú': 'you',
    },
    L.PORTUGUESE: {
        'olá': 'hello', 'obrigado': 'thank you', 'sim': 'yes', 'não': 'no',
        'por favor': 'please', 'desculpe': 'sorry', 'bom dia': 'good morning',
        'boa noite': 'good night', 'como você está': 'how are you',
        'estou bem': 'i am fine', 'amor': 'love', 'amigo': 'friend', 'água': 'water', 'casa': 'home',
    },
    L.RUSSIAN: {
        'привет': 'hello', 'спасибо': 'thank you', 'да': 'yes', 'нет': 'no',
        'пожалуйста': 'please', 'извините': 'sorry', 'доброе утро': 'good morning',
        'спокойной ночи': 'good night', 'как дела': 'how are you',
        'у меня всё хорошо': 'i am fine', 'любовь': 'love', 'друг': 'friend',
        'вода': 'water', 'дом': 'home', 'пока': 'goodbye',
    },
    L.FRENCH: {
        'bonjour': 'hello', 'merci': 'thank you', 'oui': 'yes', 'non': 'no',
        "s'il vous plaît": 'please', 'désolé': 'sorry', 'bonne nuit': 'good night',
        'bon après-midi': 'good afternoon', 'bonsoir': 'good evening',
        'comment allez-vous': 'how are you', 'comment ça va': 'how are you', 'je vais bien': 'i am fine',
        'comment vous appelez-vous': 'what is your name', "je t'aime": 'i love you',
        'tu me manques': 'i miss you', 'à plus tard': 'see you later', 'à bientôt': 'see you soon',
        'prends soin de toi': 'take care', 'bonne journée': 'have a nice day', 'au revoir': 'goodbye',
        "d'accord": 'okay', 'formidable': 'great', 'bon': 'good', 'mauvais': 'bad',
        'amour': 'love', 'ami': 'friend', 'famille': 'family', 'nourriture': 'food',
        'eau': 'water', 'maison': 'home', 'travail': 'work', "aujourd'hui": 'today', 'demain': 'tomorrow',
    },
    L.GERMAN: {
        'hallo': 'hello', 'danke': 'thank you', 'ja': 'yes', 'nein': 'no',
        'bitte': 'please', 'entschuldigung': 'sorry', 'guten morgen': 'good morning',
        'gute nacht': 'good night', 'wie geht es ihnen': 'how are you', 'wie geht es dir': 'how are you',
        'mir geht es gut': 'i am fine', 'liebe': 'love', 'freund': 'friend',
        'wasser': 'water', 'haus': 'home', 'arbeit': 'work', 'heute': 'today', 'morgen': 'tomorrow',
    },
    L.ITALIAN: {
        'ciao': 'hello', 'grazie': 'thank you', 'sì': 'yes', 'no': 'no',
        'per favore': 'please', 'scusa': 'sorry', 'buongiorno': 'good morning',
        'buonanotte': 'good night', 'come stai': 'how are you',
        'sto bene': 'i am fine', 'amore': 'love', 'amico': 'friend', 'acqua': 'water', 'casa': 'home',
    },
    L.TURKISH: {
        'merhaba': 'hello', 'teşekkürler': 'thank you', 'evet': 'yes', 'hayır': 'no',
        'lütfen': 'please', 'özür dilerim': 'sorry', 'günaydın': 'good morning',
        'iyi geceler': 'good night', 'nasılsınız': 'how are you',
        'iyiyim': 'i am fine', 'aşk': 'love', 'arkadaş': 'friend',
    },
    L.VIETNAMESE: {
        'xin chào': 'hello', 'cảm ơn': 'thank you', 'vâng': 'yes', 'không': 'no',
        'làm ơn': 'please', 'xin lỗi': 'sorry', 'chào buổi sáng': 'good morning',
        'chúc ngủ ngon': 'good night', 'bạn khỏe không': 'how are you',
        'tôi khỏe': 'i am fine', 'tình yêu': 'love', 'bạn bè': 'friend',
    },
    L.THAI: {
        'สวัสดี': 'hello', 'ขอบคุณ': 'thank you', 'ใช่': 'yes', 'ไม่': 'no',
        'กรุณา': 'please', 'ขอโทษ': 'sorry', 'สวัสดีตอนเช้า': 'good morning',
        'ราตรีสวัสดิ์': 'good night', 'สบายดีไหม': 'how are you',
        'สบายดี': 'i am fine', 'ความรัก': 'love', 'เพื่อน': 'friend',
    },
    L.INDONESIAN: {
        'halo': 'hello', 'terima kasih': 'thank you', 'ya': 'yes', 'tidak': 'no',
        'tolong': 'please', 'maaf': 'sorry', 'selamat pagi': 'good morning',
        'selamat malam': 'good night', 'apa kabar': 'how are you',
        'saya baik': 'i am fine', 'cinta': 'love', 'teman': 'friend',
    },
    L.MALAY: {
        'halo': 'hello', 'terima kasih': 'thank you', 'ya': 'yes', 'tidak': 'no',
        'tolong': 'please', 'maaf': 'sorry', 'selamat pagi': 'good morning',
        'selamat malam': 'good night', 'apa khabar': 'how are you',
        'saya baik': 'i am fine', 'cinta': 'love', 'kawan': 'friend',
    },
    L.ARABIC: {
        'مرحبا': 'hello', 'شكرا': 'thank you', 'نعم': 'yes', 'لا': 'no',
        'من فضلك': 'please', 'آسف': 'sorry', 'صباح الخير': 'good morning',
        'تصبح على خير': 'good night', 'كيف حالك': 'how are you',
        'أنا بخير': 'i am fine', 'حب': 'love', 'صديق': 'friend',
    },
    L.PERSIAN: {
        'سلام': 'hello', 'متشکرم': 'thank you', 'بله': 'yes', 'نه': 'no',
        'لطفا': 'please', 'متاسفم': 'sorry', 'صبح بخیر': 'good morning',
        'شب بخیر': 'good night', 'حالت چطوره': 'how are you',
        'خوبم': 'i am fine', 'عشق': 'love', 'دوست': 'friend',
    },
    L.DUTCH: {
        'hallo': 'hello', 'dank je': 'thank you', 'ja': 'yes', 'nee': 'no',
        'alsjeblieft': 'please', 'sorry': 'sorry', 'goedemorgen': 'good morning',
        'goedenacht': 'good night', 'hoe gaat het': 'how are you',
        'het gaat goed': 'i am fine', 'liefde': 'love', 'vriend': 'friend',
    },
    L.POLISH: {
        'cześć': 'hello', 'dziękuję': 'thank you', 'tak': 'yes', 'nie': 'no',
        'proszę': 'please', 'przepraszam': 'sorry', 'dzień dobry': 'good morning',
        'dobranoc': 'good night', 'jak się masz': 'how are you',
        'mam się dobrze': 'i am fine', 'miłość': 'love', 'przyjaciel': 'friend',
    },
    L.UKRAINIAN: {
        'привіт': 'hello', 'дякую': 'thank you', 'так': 'yes', 'ні': 'no',
        'будь ласка': 'please', 'вибачте': 'sorry', 'доброго ранку': 'good morning',
        'на добраніч': 'good night', 'як справи': 'how are you',
        'у мене все добре': 'i am fine', 'любов': 'love', 'друг': 'friend',
    },
    L.ROMANIAN: {
        'bună': 'hello', 'mulțumesc': 'thank you', 'da': 'yes', 'nu': 'no',
        'te rog': 'please', 'îmi pare rău': 'sorry', 'bună dimineața': 'good morning',
        'noapte bună': 'good night', 'ce mai faci': 'how are you',
        'sunt bine': 'i am fine', 'dragoste': 'love', 'prieten': 'friend',
    },
    L.GREEK: {
        'γεια': 'hello', 'ευχαριστώ': 'thank you', 'ναι': 'yes', 'όχι': 'no',
        'παρακαλώ': 'please', 'συγγνώμη': 'sorry', 'καλημέρα': 'good morning',
        'καληνύχτα': 'good night', 'τι κάνεις': 'how are you',
        'είμαι καλά': 'i am fine', 'αγάπη': 'love', 'φίλος': 'friend',
    },
    L.HEBREW: {
        'שלום': 'hello', 'תודה': 'thank you', 'כן': 'yes', 'לא': 'no',
        'בבקשה': 'please', 'סליחה': 'sorry', 'בוקר טוב': 'good morning',
        'לילה טוב': 'good night', 'מה שלומך': 'how are you',
        'אני בסדר': 'i am fine', 'אהבה': 'love', 'חבר': 'friend',
    },
    L.SWAHILI: {
        'habari': 'hello', 'asante': 'thank you', 'ndiyo': 'yes', 'hapana': 'no',
        'tafadhali': 'please', 'pole': 'sorry', 'habari ya asubuhi': 'good morning',
        'usiku mwema': 'good night', 'habari yako': 'how are you',
        'niko sawa': 'i am fine', 'upendo': 'love', 'rafiki': 'friend',
    },
    L.AMHARIC: {
        'ሰላም': 'hello', 'አመሰግናለሁ': 'thank you', 'አዎ': 'yes', 'አይ': 'no',
        'እባክህ': 'please', 'ይቅርታ': 'sorry', 'እንደምን አደርክ': 'good morning',
        'መልካም ሌሊት': 'good night', 'እንዴት ነህ': 'how are you',
        'ደህና ነኝ': 'i am fine', 'ፍቅር': 'love', 'ጓደኛ': 'friend',
    },
    L.HUNGARIAN: {
        'szia': 'hello', 'köszönöm': 'thank you', 'igen': 'yes', 'nem': 'no',
        'kérem': 'please', 'sajnálom': 'sorry', 'jó reggelt': 'good morning',
        'jó éjszakát': 'good night', 'hogy vagy': 'how are you',
        'jól vagyok': 'i am fine', 'szerelem': 'love', 'barát': 'friend',
    },
    L.CZECH: {
        'ahoj': 'hello', 'děkuji': 'thank you', 'ano': 'yes', 'ne': 'no',
        'prosím': 'please', 'promiňte': 'sorry', 'dobré ráno': 'good morning',
        'dobrou noc': 'good night', 'jak se máš': 'how are you',
        'mám se dobře': 'i am fine', 'láska': 'love', 'přítel': 'friend',
    },
    L.SWEDISH: {
        'hej': 'hello', 'tack': 'thank you', 'ja': 'yes', 'nej': 'no',
        'snälla': 'please', 'förlåt': 'sorry', 'god morgon': 'good morning',
        'god natt': 'good night', 'hur mår du': 'how are you',
        'jag mår bra': 'i am fine', 'kärlek': 'love', 'vän': 'friend',
    },
    L.TAGALOG: {
        'kamusta': 'hello', 'salamat': 'thank you', 'oo': 'yes', 'hindi': 'no',
        'pakiusap': 'please', 'pasensya': 'sorry', 'magandang umaga': 'good morning',
        'magandang gabi': 'good night', 'kumusta ka': 'how are you',
        'mabuti ako': 'i am fine', 'pagmamahal': 'love', 'kaibigan': 'friend',
    },
}

# Romanized spellings people type for a phrase in a non-Latin-script language.
# Indexed as typed and as rendered through correction + transliteration.
PHONETIC_PHRASES = {
    L.HINDI: {
        'namaste': 'hello', 'dhanyavaad': 'thank you', 'shukriya': 'thank you',
        'haan': 'yes', 'nahin': 'no', 'kripya': 'please',
        'kaise ho': 'how are you', 'aap kaise hain': 'how are you', 'kya haal hai': 'how are you',
        'main theek hoon': 'i am fine', 'alvida': 'goodbye', 'bahut accha': 'very good',
        'accha': 'good', 'theek hai': 'okay', 'pyaar': 'love', 'dost': 'friend',
        'ghar': 'home', 'paani': 'water', 'khana': 'food', 'kaam': 'work', 'aaj': 'today',
    },
    L.TELUGU: {
        'namaskaram': 'hello', 'dhanyavaadaalu': 'thank you', 'avunu': 'yes', 'kaadu': 'no',
        'bagunnava': 'how are you', 'bagunnara': 'how are you', 'ela unnaru': 'how are you',
        'meeru ela unnaru': 'how are you', 'ela unnav': 'how are you',
        'nenu bagunnanu': 'i am fine', 'baagundi': 'good', 'chala baagundi': 'very good',
        'prema': 'love', 'snehitudu': 'friend', 'neeru': 'water', 'illu': 'home', 'pani': 'work',
    },
    L.TAMIL: {
        'vanakkam': 'hello', 'nandri': 'thank you', 'aamaam': 'yes', 'illai': 'no',
        'eppadi irukkeenga': 'how are you', 'eppadi irukke': 'how are you',
        'naan nalla irukken': 'i am fine', 'kaadhal': 'love', 'nanban': 'friend',
        'thanni': 'water', 'veedu': 'home', 'velai': 'work',
    },
    L.KANNADA: {
        'namaskara': 'hello', 'dhanyavaadagalu': 'thank you', 'howdu': 'yes', 'illa': 'no',
        'hegiddira': 'how are you', 'chennagiddini': 'i am fine', 'preeti': 'love',
        'neeru': 'water', 'mane': 'home', 'kelasa': 'work',
    },
    L.MALAYALAM: {
        'namaskkaaram': 'hello', 'nandhi': 'thank you', 'sughamano': 'how are you',
        'sneham': 'love', 'vellam': 'water', 'veedu': 'home',
    },
    L.BENGALI: {
        'namaskar': 'hello', 'dhanyabaad': 'thank you', 'kemon acho': 'how are you',
        'kemon achen': 'how are you', 'aami bhaalo aachi': 'i am fine', 'bhaalo': 'good',
        'bhalobasa': 'love', 'bondhu': 'friend', 'jol': 'water', 'bari': 'home',
    },
    L.GUJARATI: {
        'kem cho': 'how are you', 'aabhaar': 'thank you', 'majaamaa': 'i am fine',
        'prem': 'love', 'mitra': 'friend', 'paani': 'water', 'ghar': 'home',
    },
    L.PUNJABI: {
        'sat sri akaal': 'hello', 'ki haal': 'how are you', 'dhanyavaad': 'thank you',
        'pyaar': 'love', 'dost': 'friend', 'paani': 'water', 'ghar': 'home',
    },
    L.MARATHI: {
        'namaskar': 'hello', 'dhanyavaad': 'thank you', 'kasa aahes': 'how are you',
        'mi theek aahe': 'i am fine', 'prem': 'love', 'mitra': 'friend', 'ghar': 'home',
    },
    L.URDU: {
        'assalam': 'hello', 'assalam alaikum': 'hello', 'shukriya': 'thank you',
        'aap kaise hain': 'how are you', 'mohabbat': 'love', 'dost': 'friend', 'paani': 'water',
    },
    L.ARABIC: {
        'marhaba': 'hello', 'salaam': 'hello', 'shukran': 'thank you', 'naam': 'yes',
        'kayfa haluk': 'how are you', 'sadiq': 'friend',
    },
    L.RUSSIAN: {
        'privet': 'hello', 'spasibo': 'thank you', 'da': 'yes', 'net': 'no',
        'kak dela': 'how are you', 'poka': 'goodbye', 'drug': 'friend',
    },
    L.CHINESE: {
        'ni hao': 'hello', 'xie xie': 'thank you', 'ni hao ma': 'how are you',
    },
    L.JAPANESE: {
        'konnichiwa': 'hello', 'arigatou': 'thank you', 'ogenki desu ka': 'how are you',
    },
    L.KOREAN: {
        'annyeonghaseyo': 'hello', 'kamsahamnida': 'thank you',
    },
}

# Single words for word-by-word fallback. Merged after the phrase tables, so a
# phrase sharing an English meaning keeps its place in the forward index.
WORDS = {
    L.HINDI: {
        'पीना': 'drink', 'खाना': 'eat', 'जाना': 'go', 'आना': 'come', 'देखना': 'see',
        'पढ़ना': 'read', 'लिखना': 'write', 'बोलना': 'speak', 'खेलना': 'play', 'सोना': 'sleep',
        'चाहना': 'want', 'किताब': 'book', 'स्कूल': 'school', 'बाज़ार': 'market', 'चाय': 'tea',
        'पत्र': 'letter', 'गाड़ी': 'car', 'बड़ा': 'big', 'छोटा': 'small', 'नया': 'new',
        'लाल': 'red', 'ठंडा': 'cold', 'बहुत': 'very', 'आसान': 'easy',
        'वह': 'he', 'हम': 'we', 'तुम': 'you',
    },
    L.TELUGU: {
        'తాగు': 'drink', 'తిను': 'eat', 'వెళ్ళు': 'go', 'రా': 'come', 'చూడు': 'see',
        'చదువు': 'read', 'రాయు': 'write', 'మాట్లాడు': 'speak', 'ఆడు': 'play', 'నిద్రపో': 'sleep',
        'కావాలి': 'want', 'పుస్తకం': 'book', 'బడి': 'school', 'టీ': 'tea', 'ఉత్తరం': 'letter',
        'కారు': 'car', 'పెద్ద': 'big', 'చిన్న': 'small', 'కొత్త': 'new', 'ఎరుపు': 'red',
        'చల్లని': 'cold', 'చాలా': 'very', 'సులభం': 'easy', 'అతను': 'he', 'మేము': 'we',
    },
    L.SPANISH: {
        'beber': 'drink', 'comer': 'eat', 'ir': 'go', 'venir': 'come', 'ver': 'see',
        'leer': 'read', 'escribir': 'write', 'hablar': 'speak', 'jugar': 'play', 'dormir': 'sleep',
        'querer': 'want', 'libro': 'book', 'escuela': 'school', 'mercado': 'market', 'té': 'tea',
        'carta': 'letter', 'coche': 'car', 'grande': 'big', 'pequeño': 'small', 'nuevo': 'new',
        'rojo': 'red', 'frío': 'cold', 'muy': 'very', 'fácil': 'easy', 'él': 'he', 'nosotros': 'we',
    },
    L.FRENCH: {
        'je': 'i', 'boire': 'drink', 'manger': 'eat', 'aller': 'go', 'venir': 'come', 'voir': 'see',
        'lire': 'read', 'écrire': 'write', 'parler': 'speak', 'jouer': 'play', 'dormir': 'sleep',
        'vouloir': 'want', 'livre': 'book', 'école': 'school', 'marché': 'market', 'thé': 'tea',
        'lettre': 'letter', 'voiture': 'car', 'grand': 'big', 'petit': 'small', 'nouveau': 'new',
        'rouge': 'red', 'froid': 'cold', 'très': 'very', 'facile': 'easy', 'il': 'he', 'nous': 'we',
    },
}

# English idiom -> (plain meaning, grammatical role, renderings per language).
# Languages without a rendering get the meaning translated word by word.
IDIOMS = {
    'piece of cake': ('very easy', 'nominal', {
        L.HINDI: 'बाएं हाथ का खेल', L.SPANISH: 'pan comido', L.FRENCH: "c'est du gâteau",
        L.GERMAN: 'ein Kinderspiel', L.ITALIAN: 'una passeggiata', L.PORTUGUESE: 'moleza',
        L.CHINESE: '小菜一碟', L.JAPANESE: '朝飯前', L.KOREAN: '식은 죽 먹기', L.RUSSIAN: 'пара пустяков',
    }),
    'break a leg': ('good luck', 'interjection', {
        L.HINDI: 'शुभकामनाएं', L.SPANISH: 'mucha mierda', L.FRENCH: 'merde',
        L.GERMAN: 'Hals- und Beinbruch', L.ITALIAN: 'in bocca al lupo', L.PORTUGUESE: 'boa sorte',
        L.ARABIC: 'حظ سعيد', L.CHINESE: '祝你好运', L.JAPANESE: '頑張って', L.RUSSIAN: 'ни пуха, ни пера',
    }),
    'kick the bucket': ('die', 'verbal', {
        L.HINDI: 'चल बसना', L.SPANISH: 'estirar la pata', L.FRENCH: 'casser sa pipe',
        L.GERMAN: 'ins Gras beißen', L.ITALIAN: 'tirare le cuoia', L.PORTUGUESE: 'bater as botas',
        L.RUSSIAN: 'сыграть в ящик',
    }),
    'raining cats and dogs': ('raining heavily', 'verbal', {
        L.HINDI: 'मूसलाधार बारिश', L.SPANISH: 'llueve a cántaros', L.FRENCH: 'il pleut des cordes',
        L.GERMAN: 'es regnet in Strömen', L.ITALIAN: 'piove a catinelle', L.CHINESE: '倾盆大雨',
        L.JAPANESE: '土砂降り', L.RUSSIAN: 'льёт как из ведра',
    }),
    'cost an arm and a leg': ('very expensive', 'verbal', {
        L.HINDI: 'बहुत महंगा', L.SPANISH: 'costar un ojo de la cara',
        L.FRENCH: 'coûter les yeux de la tête', L.ITALIAN: 'costare un occhio della testa',
        L.PORTUGUESE: 'custar os olhos da cara',
    }),
    'hit the nail on the head': ('exactly right', 'verbal', {
        L.HINDI: 'बिल्कुल सही कहना', L.SPANISH: 'dar en el clavo', L.FRENCH: 'mettre le doigt dessus',
    }),
    'beat around the bush': ('avoid the point', 'verbal', {
        L.HINDI: 'इधर-उधर की बात करना', L.SPANISH: 'andarse por las ramas',
        L.FRENCH: 'tourner autour du pot',
    }),
    'once in a blue moon': ('very rarely', 'adverbial', {
        L.HINDI: 'कभी-कभार', L.SPANISH: 'de higos a brevas', L.FRENCH: 'tous les trente-six du mois',
    }),
    'let the cat out of the bag': ('reveal a secret', 'verbal', {
        L.HINDI: 'राज़ खोलना', L.SPANISH: 'descubrir el pastel', L.FRENCH: 'vendre la mèche',
    }),
    'under the weather': ('sick', 'adjectival', {
        L.HINDI: 'तबीयत ठीक नहीं', L.SPANISH: 'estar pachucho', L.FRENCH: 'être patraque',
    }),
    'add insult to injury': ('make it worse', 'verbal', {
        L.HINDI: 'जले पर नमक छिड़कना', L.SPANISH: 'para colmo de males',
        L.FRENCH: "ajouter l'insulte à l'injure",
    }),
    'back to square one': ('back to the beginning', 'adverbial', {
        L.HINDI: 'फिर से शुरू करना', L.SPANISH: 'volver a empezar de cero',
        L.FRENCH: 'retour à la case départ',
    }),
}
