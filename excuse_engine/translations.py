"""Phrase tables for enhancement, apologies and plain-text documents."""

from __future__ import annotations

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        # enhancement
        "urgent": "URGENT",
        "requiresImmediateAttention": "This requires my immediate attention",
        "quiteSerious": "This is quite serious",
        "sincerelyApologize": "I sincerely apologize for any inconvenience this may cause",
        "reallySorry": "I'm really sorry about this",
        # documents
        "excuseDocument": "EXCUSE DOCUMENT",
        "apologyLetter": "APOLOGY LETTER",
        "believabilityScore": "Believability Score",
        "category": "Category",
        "urgency": "Urgency",
        "audience": "Audience",
        "tone": "Tone",
        "length": "Length",
        "generated": "Generated",
        "generatedBy": "Generated by",
        "apologyGenerator": "Apology Generator",
        "forPersonalUse": "For personal use only",
        "followUpReminder": "Follow-up Reminder",
        "considerFollowUp": "Consider following up in person or with a small gesture in a few days.",
        "checkOutExcuse": "Check out this excuse",
        # categories
        "medical": "Medical",
        "family": "Family",
        "work": "Work",
        "transport": "Transport",
        "technology": "Technology",
        "weather": "Weather",
        "emergency": "Emergency",
        "personal": "Personal",
        # urgency
        "low": "Low",
        "medium": "Medium",
        "high": "High",
        "critical": "Critical",
        # audience
        "friends": "Friends",
        "romantic": "Romantic Partner",
        "authority": "Authority Figure",
        # apology tone and length
        "sincere": "Sincere",
        "casual": "Casual",
        "formal": "Formal",
        "guilt-inducing": "Guilt-inducing",
        "short": "Short",
        "long": "Long",
        # apologies
        "sincereShort1": "I'm truly sorry. I messed up and I own it.",
        "sincereShort2": "I apologize from the bottom of my heart.",
        "sincereShort3": "I'm sorry I let you down. It won't happen again.",
        "sincereMedium1": (
            "I want to sincerely apologize for what happened. I understand that my actions affected you, "
            "and I take full responsibility. I'm committed to doing better."
        ),
        "sincereMedium2": (
            "I've been thinking about what happened and I owe you a real apology. "
            "You deserved better from me, and I'm sorry I fell short."
        ),
        "sincereLong1": (
            "I've taken some time to reflect on what happened, and I want to offer you a genuine apology. "
            "My actions were inconsiderate, and I understand they caused you frustration and disappointment. "
            "There is no excuse that makes it right. I value our relationship deeply, and I'm committed to "
            "earning back your trust through my actions, not just my words. Thank you for your patience with me."
        ),
        "casualShort1": "My bad! Sorry about that.",
        "casualShort2": "Oops, totally my fault. Sorry!",
        "casualShort3": "Sorry, I dropped the ball on this one.",
        "casualMedium1": (
            "Hey, sorry about earlier. I really didn't mean for things to go that way. Let me make it up to you?"
        ),
        "casualMedium2": "I know I messed up, and I'm sorry. Coffee's on me next time, promise.",
        "casualLong1": (
            "Hey, I just wanted to say sorry about what happened. I wasn't on top of things and you ended up "
            "dealing with the fallout, which isn't fair. I appreciate you being cool about it. "
            "I'll make sure it doesn't happen again, and I owe you one."
        ),
        "formalShort1": "Please accept my sincere apologies for the inconvenience.",
        "formalShort2": "I apologize for any disruption this may have caused.",
        "formalShort3": "Kindly accept my apologies for the oversight.",
        "formalMedium1": (
            "I would like to formally apologize for the inconvenience caused. I understand the impact of this "
            "matter and am taking the necessary steps to prevent a recurrence."
        ),
        "formalMedium2": (
            "Please accept my apologies for the delay. I recognize the importance of this commitment and "
            "regret that I was unable to meet expectations."
        ),
        "formalLong1": (
            "I am writing to extend my formal apologies regarding the recent situation. I fully acknowledge "
            "that my actions fell short of the standards expected, and I regret any inconvenience or disruption "
            "this may have caused. I have reviewed the circumstances carefully and have put measures in place "
            "to ensure this does not occur again. I appreciate your understanding and remain committed to "
            "meeting my responsibilities."
        ),
        "guiltShort1": "I'm sorry... I guess I just can't do anything right.",
        "guiltShort2": "Sorry. I know you'd never make a mistake like this.",
        "guiltShort3": "I apologize, even though I was going through a lot.",
        "guiltMedium1": (
            "I'm sorry I let you down. I've been under so much pressure lately, but I know that's no excuse. "
            "I just hope you can forgive me."
        ),
        "guiltMedium2": (
            "I apologize. I was trying to juggle everything on my own, and I guess it wasn't enough. "
            "I'll try harder, I always do."
        ),
        "guiltLong1": (
            "I want to apologize, and I really mean it. I know I messed up. It's been a really difficult time "
            "and I've been stretched so thin that things slipped through the cracks. I wish I had more support, "
            "but that's not your problem. I'll keep trying my best, like I always have, and I hope someday "
            "that will be enough."
        ),
    },
    "es": {
        "urgent": "URGENTE",
        "requiresImmediateAttention": "Esto requiere mi atención inmediata",
        "quiteSerious": "Esto es bastante serio",
        "sincerelyApologize": "Me disculpo sinceramente por cualquier inconveniente que esto pueda causar",
        "reallySorry": "Lo siento muchísimo",
        "excuseDocument": "DOCUMENTO DE EXCUSA",
        "apologyLetter": "CARTA DE DISCULPA",
        "believabilityScore": "Puntuación de Credibilidad",
        "category": "Categoría",
        "urgency": "Urgencia",
        "audience": "Audiencia",
        "tone": "Tono",
        "length": "Longitud",
        "generated": "Generado",
        "generatedBy": "Generado por",
        "apologyGenerator": "Generador de Disculpas",
        "forPersonalUse": "Solo para uso personal",
        "followUpReminder": "Recordatorio de Seguimiento",
        "considerFollowUp": "Considera hacer un seguimiento en persona o con un pequeño gesto en unos días.",
        "checkOutExcuse": "Mira esta excusa",
        "medical": "Médica",
        "family": "Familia",
        "work": "Trabajo",
        "transport": "Transporte",
        "technology": "Tecnología",
        "weather": "Clima",
        "emergency": "Emergencia",
        "personal": "Personal",
        "low": "Baja",
        "medium": "Media",
        "high": "Alta",
        "critical": "Crítica",
        "friends": "Amigos",
        "romantic": "Pareja",
        "authority": "Figura de Autoridad",
        "sincere": "Sincero",
        "casual": "Casual",
        "formal": "Formal",
        "guilt-inducing": "Que induce culpa",
        "short": "Corta",
        "long": "Larga",
        "sincereShort1": "Lo siento de verdad. Me equivoqué y lo asumo.",
        "sincereShort2": "Te pido disculpas de todo corazón.",
        "sincereShort3": "Siento haberte decepcionado. No volverá a pasar.",
        "sincereMedium1": (
            "Quiero disculparme sinceramente por lo que pasó. Entiendo que mis acciones te afectaron "
            "y asumo toda la responsabilidad. Me comprometo a hacerlo mejor."
        ),
        "sincereMedium2": (
            "He estado pensando en lo que pasó y te debo una disculpa de verdad. "
            "Merecías algo mejor de mi parte y siento no haber estado a la altura."
        ),
        "sincereLong1": (
            "Me he tomado un tiempo para reflexionar sobre lo que pasó y quiero ofrecerte una disculpa sincera. "
            "Mis acciones fueron desconsideradas y entiendo que te causaron frustración y decepción. "
            "Valoro profundamente nuestra relación y me comprometo a recuperar tu confianza con hechos, "
            "no solo con palabras. Gracias por tu paciencia."
        ),
        "casualShort1": "¡Culpa mía! Perdón.",
        "casualShort2": "Ups, fue totalmente mi culpa. ¡Perdón!",
        "casualShort3": "Perdón, la regué con esto.",
        "casualMedium1": "Oye, perdón por lo de antes. De verdad no quería que pasara así. ¿Te lo compenso?",
        "casualMedium2": "Sé que la regué y lo siento. El próximo café lo pago yo, lo prometo.",
        "casualLong1": (
            "Oye, solo quería decirte que siento lo que pasó. No estuve atento y terminaste lidiando con las "
            "consecuencias, y eso no es justo. Gracias por tomártelo bien. Me aseguraré de que no vuelva a pasar."
        ),
        "formalShort1": "Le ruego acepte mis sinceras disculpas por las molestias.",
        "formalShort2": "Me disculpo por cualquier inconveniente que esto haya podido causar.",
        "formalShort3": "Le ruego disculpe el descuido.",
        "formalMedium1": (
            "Quisiera disculparme formalmente por las molestias ocasionadas. Comprendo el impacto de este "
            "asunto y estoy tomando las medidas necesarias para evitar que se repita."
        ),
        "formalMedium2": (
            "Le ruego acepte mis disculpas por el retraso. Reconozco la importancia de este compromiso "
            "y lamento no haber cumplido con las expectativas."
        ),
        "formalLong1": (
            "Le escribo para presentarle mis disculpas formales por la situación reciente. Reconozco plenamente "
            "que mis acciones no estuvieron a la altura de lo esperado y lamento cualquier inconveniente. "
            "He revisado las circunstancias con detenimiento y he tomado medidas para que no vuelva a ocurrir. "
            "Agradezco su comprensión."
        ),
        "guiltShort1": "Lo siento... supongo que no hago nada bien.",
        "guiltShort2": "Perdón. Sé que tú nunca cometerías un error así.",
        "guiltShort3": "Me disculpo, aunque estaba pasando por mucho.",
        "guiltMedium1": (
            "Siento haberte decepcionado. He estado bajo mucha presión últimamente, pero sé que no es excusa. "
            "Solo espero que puedas perdonarme."
        ),
        "guiltMedium2": (
            "Me disculpo. Intentaba con todo yo solo y supongo que no fue suficiente. Me esforzaré más, como siempre."
        ),
        "guiltLong1": (
            "Quiero disculparme, y lo digo en serio. Sé que me equivoqué. Ha sido una época muy difícil y "
            "he estado tan desbordado que se me escaparon cosas. Ojalá tuviera más apoyo, pero ese no es tu "
            "problema. Seguiré dando lo mejor de mí, como siempre, y espero que algún día sea suficiente."
        ),
    },
    "fr": {
        "urgent": "URGENT",
        "requiresImmediateAttention": "Cela nécessite mon attention immédiate",
        "quiteSerious": "C'est assez grave",
        "sincerelyApologize": "Je m'excuse sincèrement pour tout désagrément que cela pourrait causer",
        "reallySorry": "Je suis vraiment désolé",
        "excuseDocument": "DOCUMENT D'EXCUSE",
        "apologyLetter": "LETTRE D'EXCUSES",
        "believabilityScore": "Score de Crédibilité",
        "category": "Catégorie",
        "urgency": "Urgence",
        "audience": "Public",
        "tone": "Ton",
        "length": "Longueur",
        "generated": "Généré",
        "generatedBy": "Généré par",
        "apologyGenerator": "Générateur d'Excuses",
        "forPersonalUse": "Pour usage personnel uniquement",
        "followUpReminder": "Rappel de Suivi",
        "considerFollowUp": "Pensez à faire un suivi en personne ou avec un petit geste dans quelques jours.",
        "checkOutExcuse": "Découvrez cette excuse",
        "medical": "Médical",
        "family": "Famille",
        "work": "Travail",
        "transport": "Transport",
        "technology": "Technologie",
        "weather": "Météo",
        "emergency": "Urgence",
        "personal": "Personnel",
        "low": "Faible",
        "medium": "Moyenne",
        "high": "Élevée",
        "critical": "Critique",
        "friends": "Amis",
        "romantic": "Partenaire",
        "authority": "Figure d'Autorité",
        "sincere": "Sincère",
        "casual": "Décontracté",
        "formal": "Formel",
        "guilt-inducing": "Culpabilisant",
        "short": "Courte",
        "long": "Longue",
        "sincereShort1": "Je suis vraiment désolé. J'ai fait une erreur et je l'assume.",
        "sincereShort2": "Je te présente mes excuses du fond du cœur.",
        "sincereShort3": "Je suis désolé de t'avoir déçu. Cela ne se reproduira pas.",
        "sincereMedium1": (
            "Je tiens à m'excuser sincèrement pour ce qui s'est passé. Je comprends que mes actes t'ont affecté "
            "et j'en assume l'entière responsabilité. Je m'engage à faire mieux."
        ),
        "sincereMedium2": (
            "J'ai réfléchi à ce qui s'est passé et je te dois de vraies excuses. "
            "Tu méritais mieux de ma part et je suis désolé de ne pas avoir été à la hauteur."
        ),
        "sincereLong1": (
            "J'ai pris le temps de réfléchir à ce qui s'est passé et je veux te présenter des excuses sincères. "
            "Mes actes étaient irréfléchis et je comprends qu'ils t'ont causé frustration et déception. "
            "Notre relation compte énormément pour moi et je m'engage à regagner ta confiance par mes actes. "
            "Merci pour ta patience."
        ),
        "casualShort1": "Ma faute ! Désolé.",
        "casualShort2": "Oups, c'est entièrement ma faute. Désolé !",
        "casualShort3": "Désolé, j'ai complètement raté ça.",
        "casualMedium1": "Hé, désolé pour tout à l'heure. Je ne voulais vraiment pas que ça se passe comme ça.",
        "casualMedium2": "Je sais que j'ai merdé, désolé. Le prochain café est pour moi, promis.",
        "casualLong1": (
            "Hé, je voulais juste m'excuser pour ce qui s'est passé. Je n'étais pas au point et c'est toi qui as "
            "géré les conséquences, ce n'est pas juste. Merci d'avoir été cool. Ça ne se reproduira pas."
        ),
        "formalShort1": "Veuillez accepter mes sincères excuses pour la gêne occasionnée.",
        "formalShort2": "Je m'excuse pour toute perturbation que cela a pu causer.",
        "formalShort3": "Veuillez excuser cet oubli.",
        "formalMedium1": (
            "Je souhaite vous présenter mes excuses formelles pour la gêne occasionnée. Je mesure l'impact de "
            "cette situation et je prends les mesures nécessaires pour éviter qu'elle ne se reproduise."
        ),
        "formalMedium2": (
            "Veuillez accepter mes excuses pour ce retard. Je reconnais l'importance de cet engagement "
            "et regrette de ne pas avoir répondu aux attentes."
        ),
        "formalLong1": (
            "Je vous écris afin de vous présenter mes excuses formelles concernant la situation récente. "
            "Je reconnais pleinement que mes actes n'ont pas été à la hauteur des attentes et je regrette "
            "tout désagrément. J'ai examiné les circonstances avec attention et mis en place des mesures pour "
            "que cela ne se reproduise pas. Je vous remercie de votre compréhension."
        ),
        "guiltShort1": "Désolé... je suppose que je ne fais jamais rien de bien.",
        "guiltShort2": "Désolé. Je sais que toi, tu ne ferais jamais une telle erreur.",
        "guiltShort3": "Je m'excuse, même si je traversais une période difficile.",
        "guiltMedium1": (
            "Je suis désolé de t'avoir déçu. J'ai été sous tellement de pression ces derniers temps, "
            "mais je sais que ce n'est pas une excuse. J'espère juste que tu pourras me pardonner."
        ),
        "guiltMedium2": (
            "Je m'excuse. J'essayais de tout gérer seul et je suppose que ça ne suffisait pas. "
            "Je ferai plus d'efforts, comme toujours."
        ),
        "guiltLong1": (
            "Je veux m'excuser, et je le pense vraiment. Je sais que j'ai fait une erreur. Cette période a été "
            "très difficile et j'étais tellement débordé que des choses m'ont échappé. J'aurais aimé avoir plus "
            "de soutien, mais ce n'est pas ton problème. Je continuerai à faire de mon mieux, comme toujours."
        ),
    },
    "hi": {
        "urgent": "अत्यावश्यक",
        "requiresImmediateAttention": "इस पर मेरा तुरंत ध्यान देना ज़रूरी है",
        "quiteSerious": "यह काफी गंभीर है",
        "sincerelyApologize": "इससे होने वाली किसी भी असुविधा के लिए मैं ईमानदारी से क्षमा चाहता हूं",
        "reallySorry": "मुझे इसके लिए सच में खेद है",
        "excuseDocument": "बहाना दस्तावेज़",
        "apologyLetter": "माफ़ीनामा",
        "believabilityScore": "विश्वसनीयता स्कोर",
        "category": "श्रेणी",
        "urgency": "तात्कालिकता",
        "audience": "श्रोता",
        "tone": "लहजा",
        "length": "लंबाई",
        "generated": "बनाया गया",
        "generatedBy": "द्वारा बनाया गया",
        "apologyGenerator": "माफ़ी जनरेटर",
        "forPersonalUse": "केवल व्यक्तिगत उपयोग के लिए",
        "followUpReminder": "फॉलो-अप अनुस्मारक",
        "considerFollowUp": "कुछ दिनों में व्यक्तिगत रूप से या किसी छोटे से इशारे के साथ फॉलो-अप करने पर विचार करें।",
        "checkOutExcuse": "यह बहाना देखें",
        "medical": "चिकित्सा",
        "family": "परिवार",
        "work": "काम",
        "transport": "परिवहन",
        "technology": "तकनीक",
        "weather": "मौसम",
        "emergency": "आपातकाल",
        "personal": "व्यक्तिगत",
        "low": "कम",
        "medium": "मध्यम",
        "high": "उच्च",
        "critical": "गंभीर",
        "sincereShort1": "मुझे सच में खेद है। गलती मेरी है और मैं इसे स्वीकार करता हूं।",
        "sincereShort2": "मैं दिल से माफ़ी मांगता हूं।",
        "sincereShort3": "मुझे खेद है कि मैंने आपको निराश किया। ऐसा दोबारा नहीं होगा।",
        "sincereMedium1": (
            "जो हुआ उसके लिए मैं ईमानदारी से माफ़ी मांगना चाहता हूं। मैं समझता हूं कि मेरे कामों से आप प्रभावित हुए, "
            "और मैं इसकी पूरी ज़िम्मेदारी लेता हूं।"
        ),
        "sincereMedium2": "मैं जो हुआ उसके बारे में सोच रहा था और मुझे आपसे सच्ची माफ़ी मांगनी चाहिए।",
        "sincereLong1": (
            "मैंने जो हुआ उस पर विचार करने के लिए समय लिया है, और मैं आपसे सच्चे दिल से माफ़ी मांगना चाहता हूं। "
            "मेरे काम लापरवाह थे और मैं समझता हूं कि उनसे आपको निराशा हुई। मैं हमारे रिश्ते को बहुत महत्व देता हूं "
            "और अपने कामों से आपका भरोसा फिर से जीतने के लिए प्रतिबद्ध हूं।"
        ),
        "casualShort1": "मेरी गलती! माफ़ करना।",
        "casualShort2": "उफ़, पूरी गलती मेरी थी। सॉरी!",
        "casualShort3": "सॉरी, इस बार मुझसे चूक हो गई।",
        "casualMedium1": "अरे, पहले के लिए सॉरी। मेरा इरादा ऐसा बिल्कुल नहीं था। क्या मैं इसकी भरपाई कर सकता हूं?",
        "casualMedium2": "मुझे पता है मैंने गड़बड़ की, सॉरी। अगली कॉफी मेरी तरफ से, वादा।",
        "casualLong1": (
            "अरे, जो हुआ उसके लिए बस सॉरी कहना चाहता था। मैं ध्यान नहीं दे पाया और परेशानी तुम्हें झेलनी पड़ी, "
            "जो ठीक नहीं है। इसे समझने के लिए धन्यवाद। मैं ध्यान रखूंगा कि ऐसा दोबारा न हो।"
        ),
        "formalShort1": "असुविधा के लिए कृपया मेरी हार्दिक क्षमा स्वीकार करें।",
        "formalShort2": "इससे हुई किसी भी बाधा के लिए मैं क्षमा चाहता हूं।",
        "formalShort3": "कृपया इस चूक के लिए मुझे क्षमा करें।",
        "formalMedium1": (
            "हुई असुविधा के लिए मैं औपचारिक रूप से क्षमा मांगना चाहता हूं। मैं इस मामले के प्रभाव को समझता हूं "
            "और इसकी पुनरावृत्ति रोकने के लिए आवश्यक कदम उठा रहा हूं।"
        ),
        "formalMedium2": "देरी के लिए कृपया मेरी क्षमा स्वीकार करें। मुझे खेद है कि मैं अपेक्षाओं पर खरा नहीं उतर सका।",
        "formalLong1": (
            "मैं हाल की स्थिति के संबंध में अपनी औपचारिक क्षमा याचना प्रस्तुत करने के लिए लिख रहा हूं। "
            "मैं पूरी तरह स्वीकार करता हूं कि मेरे कार्य अपेक्षित मानकों से कम रहे। मैंने परिस्थितियों की "
            "सावधानीपूर्वक समीक्षा की है और ऐसे उपाय किए हैं जिससे यह दोबारा न हो। आपकी समझ के लिए धन्यवाद।"
        ),
        "guiltShort1": "माफ़ करना... शायद मैं कुछ भी ठीक नहीं कर सकता।",
        "guiltShort2": "सॉरी। मुझे पता है आप ऐसी गलती कभी नहीं करते।",
        "guiltShort3": "मैं माफ़ी मांगता हूं, हालांकि मैं बहुत कुछ झेल रहा था।",
        "guiltMedium1": (
            "मुझे खेद है कि मैंने आपको निराश किया। हाल ही में मुझ पर बहुत दबाव रहा है, "
            "लेकिन यह कोई बहाना नहीं है। बस उम्मीद है कि आप मुझे माफ़ कर देंगे।"
        ),
        "guiltMedium2": "मैं माफ़ी मांगता हूं। मैं अकेले सब कुछ संभालने की कोशिश कर रहा था, शायद वह काफी नहीं था।",
        "guiltLong1": (
            "मैं माफ़ी मांगना चाहता हूं, और मैं सच में कह रहा हूं। मुझे पता है मैंने गलती की। यह बहुत कठिन समय रहा है "
            "और मैं इतना थका हुआ था कि चीज़ें छूट गईं। काश मुझे और सहारा मिलता, लेकिन यह आपकी समस्या नहीं है। "
            "मैं हमेशा की तरह अपनी पूरी कोशिश करता रहूंगा।"
        ),
    },
}


def translate(key: str, language: str) -> str:
    """Look up ``key`` for ``language``, falling back to English and then the key."""

    value = TRANSLATIONS.get(language, {}).get(key)
    if value:
        return value
    return TRANSLATIONS["en"].get(key, key)
